import numpy as np

# Little-endian so that tobytes() is always valid UTF-16-LE
CODE_UNIT = np.dtype("<u2")
MAX_CODE_UNIT = 0xFFFF
