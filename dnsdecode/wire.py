"""Decoding of the DNS header, question and resource-record sections."""

import ipaddress
from dataclasses import dataclass

from .codes import rdatatype_to_string
from .errors import (
    AnswerTooShortError,
    HeaderTooShortError,
    LabelInvalidDataError,
    LabelInvalidOffsetError,
    LabelInvalidPointerError,
    LabelTooLongError,
    LabelTooShortError,
    QtypeTooShortError,
    RdataTooShortError,
)

DNS_HEADER_LENGTH = 12
OPT_TYPE = 41
MAX_NAME_LENGTH = 254


@dataclass(frozen=True)
class DnsHeader:
    id: int
    qr: int
    opcode: int
    aa: int
    tc: int
    rd: int
    ra: int
    z: int
    ad: int
    cd: int
    rcode: int
    qdcount: int
    ancount: int
    nscount: int
    arcount: int


@dataclass(frozen=True)
class DnsAnswer:
    name: str
    rdatatype: str
    rrclass: int
    ttl: int
    rdata: str


def _u16(data, offset):
    return int.from_bytes(data[offset:offset + 2], "big")


def _u32(data, offset):
    return int.from_bytes(data[offset:offset + 4], "big")


def _i32(data, offset):
    return int.from_bytes(data[offset:offset + 4], "big", signed=True)


def _text(data):
    return bytes(data).decode("utf-8", errors="replace")


def decode_header(payload):
    """Decode the fixed 12-byte DNS header."""
    if len(payload) < DNS_HEADER_LENGTH:
        raise HeaderTooShortError()
    flags = _u16(payload, 2)
    return DnsHeader(
        id=_u16(payload, 0),
        qr=flags >> 15,
        opcode=(flags >> 11) & 0xF,
        aa=(flags >> 10) & 1,
        tc=(flags >> 9) & 1,
        rd=(flags >> 8) & 1,
        ra=(flags >> 7) & 1,
        z=(flags >> 6) & 1,
        ad=(flags >> 5) & 1,
        cd=(flags >> 4) & 1,
        rcode=flags & 0xF,
        qdcount=_u16(payload, 4),
        ancount=_u16(payload, 6),
        nscount=_u16(payload, 8),
        arcount=_u16(payload, 10),
    )


def parse_labels(offset, payload):
    """Decode a possibly compressed domain name.

    Returns the dotted name and the offset just past the name in the
    original run. Compression pointers must point strictly backwards.
    """
    if offset < 0:
        raise LabelInvalidOffsetError()

    labels = []
    start_offset = offset
    max_offset = len(payload)
    end_offset = None
    total_length = 0

    while True:
        if offset >= len(payload):
            raise LabelTooShortError()
        if offset >= max_offset:
            raise LabelInvalidPointerError()

        length = payload[offset]
        kind = length & 0xC0
        if length == 0:
            if end_offset is None:
                end_offset = offset + 1
            break
        if kind == 0xC0:
            if offset + 2 > len(payload):
                raise LabelTooShortError()
            if offset + 2 > max_offset:
                raise LabelInvalidPointerError()
            pointer = _u16(payload, offset) & 0x3FFF
            if pointer >= start_offset:
                raise LabelInvalidPointerError()
            if end_offset is None:
                end_offset = offset + 2
            max_offset = start_offset
            start_offset = pointer
            offset = pointer
        elif kind == 0:
            if offset + length + 1 > len(payload):
                raise LabelTooShortError()
            if offset + length + 1 > max_offset:
                raise LabelInvalidPointerError()
            total_length += length + 1
            if total_length > MAX_NAME_LENGTH:
                raise LabelTooLongError()
            labels.append(_text(payload[offset + 1:offset + length + 1]))
            offset += length + 1
        else:
            raise LabelInvalidDataError()

    return ".".join(labels), end_offset


def decode_question(qdcount, payload):
    """Decode qdcount questions; return (qname, qtype, next_offset) of the last one."""
    offset = DNS_HEADER_LENGTH
    qname = ""
    qtype = 0
    for _ in range(qdcount):
        qname, offset = parse_labels(offset, payload)
        if len(payload) - offset < 4:
            raise QtypeTooShortError()
        qtype = _u16(payload, offset)
        offset += 4
    return qname, qtype, offset


def decode_answers(ancount, start_offset, payload):
    """Decode ancount resource records; return (answers, next_offset).

    OPT records are skipped; they belong to the EDNS decoder.
    """
    offset = start_offset
    answers = []
    for _ in range(ancount):
        name, next_offset = parse_labels(offset, payload)
        if len(payload) - next_offset < 10:
            raise AnswerTooShortError()
        rrtype = _u16(payload, next_offset)
        rrclass = _u16(payload, next_offset + 2)
        ttl = _u32(payload, next_offset + 4)
        rdlength = _u16(payload, next_offset + 8)

        rdata_offset = next_offset + 10
        rdata_end = rdata_offset + rdlength
        if len(payload) - rdata_offset < rdlength:
            raise RdataTooShortError()

        if rrtype != OPT_TYPE:
            rdatatype = rdatatype_to_string(rrtype)
            parsed = parse_rdata(
                rdatatype, payload[rdata_offset:rdata_end], payload[:rdata_end], rdata_offset
            )
            answers.append(DnsAnswer(name, rdatatype, rrclass, ttl, parsed))
        offset = rdata_end
    return answers, offset


def parse_a(rdata):
    if len(rdata) < 4:
        raise RdataTooShortError()
    return str(ipaddress.IPv4Address(bytes(rdata[:4])))


def parse_aaaa(rdata):
    if len(rdata) < 16:
        raise RdataTooShortError()
    addr = ipaddress.IPv6Address(bytes(rdata[:16]))
    if addr.ipv4_mapped is not None:
        return str(addr.ipv4_mapped)
    return str(addr)


def parse_txt(rdata):
    if len(rdata) < 1:
        raise RdataTooShortError()
    length = rdata[0]
    if len(rdata) - 1 < length:
        raise RdataTooShortError()
    return _text(rdata[1:length + 1])


def parse_cname(rdata_offset, payload):
    return parse_labels(rdata_offset, payload)[0]


def parse_ns(rdata_offset, payload):
    return parse_labels(rdata_offset, payload)[0]


def parse_ptr(rdata_offset, payload):
    return parse_labels(rdata_offset, payload)[0]


def parse_mx(rdata_offset, payload):
    # preference plus at least one byte of exchange name
    if len(payload) < rdata_offset + 3:
        raise RdataTooShortError()
    preference = _u16(payload, rdata_offset)
    host, _ = parse_labels(rdata_offset + 2, payload)
    return f"{preference} {host}"


def parse_srv(rdata_offset, payload):
    if len(payload) < rdata_offset + 7:
        raise RdataTooShortError()
    priority = _u16(payload, rdata_offset)
    weight = _u16(payload, rdata_offset + 2)
    port = _u16(payload, rdata_offset + 4)
    target, _ = parse_labels(rdata_offset + 6, payload)
    return f"{priority} {weight} {port} {target}"


def parse_soa(rdata_offset, payload):
    primary_ns, offset = parse_labels(rdata_offset, payload)
    mailbox, offset = parse_labels(offset, payload)
    if offset + 20 > len(payload):
        raise RdataTooShortError()
    serial = _u32(payload, offset)
    refresh = _i32(payload, offset + 4)
    retry = _i32(payload, offset + 8)
    expire = _i32(payload, offset + 12)
    minimum = _u32(payload, offset + 16)
    return f"{primary_ns} {mailbox} {serial} {refresh} {retry} {expire} {minimum}"


_RDATA_PARSERS = {"A": parse_a, "AAAA": parse_aaaa, "TXT": parse_txt}

_OFFSET_PARSERS = {
    "CNAME": parse_cname,
    "MX": parse_mx,
    "SRV": parse_srv,
    "NS": parse_ns,
    "PTR": parse_ptr,
    "SOA": parse_soa,
}


def parse_rdata(rdatatype, rdata, payload, rdata_offset):
    """Render RDATA as text; types without a decoder render as '-'."""
    if rdatatype in _RDATA_PARSERS:
        return _RDATA_PARSERS[rdatatype](rdata)
    if rdatatype in _OFFSET_PARSERS:
        return _OFFSET_PARSERS[rdatatype](rdata_offset, payload)
    return "-"