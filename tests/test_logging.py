import logging

from storefront.utils.logging import HANDLER_NAME, setup_logging


def test_setup_logging_adds_one_handler_and_keeps_others():
    root = logging.getLogger()
    existing = logging.NullHandler()
    root.addHandler(existing)
    try:
        setup_logging("INFO")
        setup_logging("DEBUG")

        assert existing in root.handlers
        assert len([h for h in root.handlers if h.get_name() == HANDLER_NAME]) == 1
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(existing)
        root.setLevel(logging.WARNING)
