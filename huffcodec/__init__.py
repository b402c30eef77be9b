from huffcodec.codec import compress, decompress
from huffcodec.errors import (
    CorruptStreamError,
    EmptyInputError,
    HuffcodecError,
    MalformedTreeError,
    TruncatedBitstreamError,
)
