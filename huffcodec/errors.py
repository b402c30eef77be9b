class HuffcodecError(ValueError):
    """Base class for every failure raised by the codec."""


class EmptyInputError(HuffcodecError):
    pass


class MalformedTreeError(HuffcodecError):
    """Tree text could not be parsed. `stage` names the production that failed."""

    def __init__(self, message: str, *, stage: str, pos: int):
        super().__init__(f"Malformed tree ({stage}) at position {pos}: {message}")
        self.stage = stage
        self.pos = pos


class TruncatedBitstreamError(HuffcodecError):
    def __init__(self, dangling: int):
        super().__init__(f"Bitstream ended mid-code ({dangling} dangling bits)")
        self.dangling = dangling


class CorruptStreamError(HuffcodecError):
    pass
