from .conversion import DecodedImage, bruh_path_for, compile_image, describe_container, open_bruh
from .errors import BruhError, EncodingError, FormatError, OutOfBoundsError

__version__ = "0.1.0"

__all__ = [
    "BruhError",
    "bruh_path_for",
    "compile_image",
    "DecodedImage",
    "describe_container",
    "EncodingError",
    "FormatError",
    "open_bruh",
    "OutOfBoundsError",
]
