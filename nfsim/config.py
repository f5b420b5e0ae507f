import logging
from datetime import datetime

logger = logging.getLogger("NFSim")

# Configuration settings

class Config:
    # Window settings
    WIDTH, HEIGHT = 900, 720
    TITLE = "NFSim - Next Fit Memory Allocation Simulation"
    FPS = 30
    FONT_NAME = "Arial"
    FONT_SIZE = 20
    SMALL_FONT_SIZE = 16

    # Colors
    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)
    GREEN = (46, 204, 113)
    RED = (231, 76, 60)
    BLUE = (52, 152, 219)
    LIGHT_BLUE = (174, 214, 241)
    GRAY = (189, 195, 199)
    DARK_GRAY = (127, 140, 141)
    YELLOW = (241, 196, 15)
    ORANGE = (230, 126, 34)
    DARK_BLUE = (41, 128, 185)

    # Memory settings
    UNIT = "KB"

    # UI settings
    ROW_HEIGHT = 26
    BAR_WIDTH = 140
    MAX_DISPLAY_ROWS = 10

    # Logging settings
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
    LOG_FILE_PATTERN = "nfsim_log_{stamp}.log"


def default_log_file():
    return Config.LOG_FILE_PATTERN.format(stamp=datetime.now().strftime('%Y%m%d_%H%M%S'))


def setup_logging(filename=None):
    """Send the NFSim log to a timestamped file (or the given one)."""
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format=Config.LOG_FORMAT,
        filename=filename or default_log_file()
    )
    logger.info("Logging initialized")
