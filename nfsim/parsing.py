import logging

logger = logging.getLogger("NFSim")


class InputValidationError(ValueError):
    def __init__(self, label, item=None):
        self.label = label
        self.item = item
        if item is None:
            message = f"{label}: no values entered"
        else:
            message = f"{label}: '{item}' is not a valid number"
        super().__init__(message)


def parse_sizes(text, label="Sizes"):
    """Parse a comma separated list such as "100, 500,200" into integers."""
    if text is None or not text.strip():
        raise InputValidationError(label)

    sizes = []
    for item in text.split(","):
        item = item.strip()
        try:
            sizes.append(int(item))
        except ValueError:
            raise InputValidationError(label, item) from None
    return sizes


def parse_input(block_text, process_text):
    try:
        blocks = parse_sizes(block_text, "Memory blocks")
        processes = parse_sizes(process_text, "Processes")
    except InputValidationError as e:
        logger.warning(f"Rejected input: {e}")
        raise
    return blocks, processes
