DEFAULT_ON = "*"
DEFAULT_OFF = "."

# Upper bound on the number of shape lines the demo will read
MAX_SHAPES = 1024
DEFAULT_IMAGE_SCALE = 8

CONFIG_ENV = "BWRASTER_CONFIG"
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(module)s:%(funcName)s %(lineno)s] %(message)s"

FLIP = "FLIP"
RECTANGLE = "RECTANGLE"
SQUARE = "SQUARE"
ELLIPSE = "ELLIPSE"
CIRCLE = "CIRCLE"

EXIT_OK = 0
EXIT_BAD_INTEGER = 1
EXIT_BAD_ARGUMENT_COUNT = 2
EXIT_BAD_DIMENSION = 3
EXIT_END_OF_INPUT = 4
EXIT_BAD_CONFIG = 5
