"""Decoding of a whole DNS message body according to its header."""

from dataclasses import dataclass, field

from .codes import rcode_to_string, rdatatype_to_string
from .edns import EdnsInfo, decode_edns
from .errors import DecodeError, DecodingError
from .wire import decode_answers, decode_question

UPDATE_OPCODE = 5


@dataclass
class DnsFlags:
    qr: bool = False
    tc: bool = False
    aa: bool = False
    ra: bool = False
    ad: bool = False


@dataclass
class DecodedPayload:
    id: int = 0
    opcode: int = 0
    rcode: str = ""
    operation: "str | None" = None
    flags: DnsFlags = field(default_factory=DnsFlags)
    qname: str = ""
    qtype: str = ""
    answers: list = field(default_factory=list)
    nameservers: list = field(default_factory=list)
    records: list = field(default_factory=list)
    edns: EdnsInfo = field(default_factory=EdnsInfo)
    malformed: bool = False


def decode_payload(payload, header):
    """Decode the sections of a message described by its decoded header.

    On failure a DecodingError naming the section is raised; its ``cause``
    is the original error and its ``partial`` attribute holds what was
    decoded so far, marked as malformed.
    """
    result = DecodedPayload(
        id=header.id,
        opcode=header.opcode,
        rcode=rcode_to_string(header.rcode),
        flags=DnsFlags(
            qr=header.qr == 1,
            tc=header.tc == 1,
            aa=header.aa == 1,
            ra=header.ra == 1,
            ad=header.ad == 1,
        ),
    )
    if header.opcode == UPDATE_OPCODE:
        result.operation = "UPDATE_QUERY" if header.qr == 1 else "UPDATE_RESPONSE"

    part = "query"
    try:
        offset = 0
        if header.qdcount > 0:
            qname, qtype, offset = decode_question(header.qdcount, payload)
            result.qname = qname
            result.qtype = rdatatype_to_string(qtype)

        part = "answer records"
        if header.ancount > 0:
            result.answers, offset = decode_answers(header.ancount, offset, payload)

        part = "authority records"
        if header.nscount > 0:
            result.nameservers, offset = decode_answers(header.nscount, offset, payload)

        if header.arcount > 0:
            part = "additional records"
            result.records, _ = decode_answers(header.arcount, offset, payload)
            part = "edns options"
            result.edns, _ = decode_edns(header.arcount, offset, payload)
    except DecodeError as exc:
        result.malformed = True
        error = DecodingError(part, exc)
        error.partial = result
        raise error from exc

    return result