"""Exceptions raised while decoding DNS wire data."""


class DecodeError(ValueError):
    """Base class for every malformed-payload condition."""

    default_message = "malformed DNS packet"

    def __init__(self, message=None):
        super().__init__(self.default_message if message is None else message)


class HeaderTooShortError(DecodeError):
    default_message = "malformed pkt, dns payload too short to decode header"


class LabelTooLongError(DecodeError):
    default_message = "malformed pkt, label too long"


class LabelInvalidDataError(DecodeError):
    default_message = "malformed pkt, invalid label length byte"


class LabelInvalidOffsetError(DecodeError):
    default_message = "malformed pkt, invalid offset to decode label"


class LabelInvalidPointerError(DecodeError):
    default_message = "malformed pkt, label pointer not pointing to prior data"


class LabelTooShortError(DecodeError):
    default_message = "malformed pkt, dns payload too short to get label"


class QtypeTooShortError(DecodeError):
    default_message = "malformed pkt, not enough data to decode qtype"


class AnswerTooShortError(DecodeError):
    default_message = "malformed pkt, not enough data to decode answer"


class RdataTooShortError(DecodeError):
    default_message = "malformed pkt, not enough data to decode rdata answer"


class EdnsBadRootDomainError(DecodeError):
    default_message = "edns, name MUST be 0 (root domain)"


class EdnsDataTooShortError(DecodeError):
    default_message = "edns, not enough data to decode rdata answer"


class EdnsOptionTooShortError(DecodeError):
    default_message = "edns, not enough data to decode option answer"


class EdnsCsubnetBadFamilyError(DecodeError):
    default_message = "edns, csubnet option bad family"


class EdnsTooManyOptsError(DecodeError):
    default_message = "edns, packet contained too many OPT RRs"


class DecodingError(DecodeError):
    """Failure to decode one section of a message; wraps the original error."""

    def __init__(self, part, cause):
        self.part = part
        self.cause = cause
        super().__init__(f"malformed {part} in DNS packet: {cause}")

    def __str__(self):
        return f"malformed {self.part} in DNS packet: {self.cause}"