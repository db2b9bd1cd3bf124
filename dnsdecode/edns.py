"""Decoding of the EDNS(0) OPT pseudo-record and its options."""

import ipaddress
from dataclasses import dataclass, field

from .codes import EXTENDED_ERROR_CODES, opt_code_to_string
from .errors import (
    AnswerTooShortError,
    EdnsBadRootDomainError,
    EdnsCsubnetBadFamilyError,
    EdnsDataTooShortError,
    EdnsOptionTooShortError,
    EdnsTooManyOptsError,
)
from .wire import OPT_TYPE, parse_labels


@dataclass(frozen=True)
class DnsOption:
    code: int
    name: str
    data: str


@dataclass
class EdnsInfo:
    udp_size: int = 0
    extended_rcode: int = 0
    version: int = 0
    do: int = 0
    z: int = 0
    options: list = field(default_factory=list)


def _u16(data, offset):
    return int.from_bytes(data[offset:offset + 2], "big")


def _u32(data, offset):
    return int.from_bytes(data[offset:offset + 4], "big")


def _text(data):
    return bytes(data).decode("utf-8", errors="replace")


def _ipv6_text(raw):
    addr = ipaddress.IPv6Address(raw)
    if addr.ipv4_mapped is not None:
        return str(addr.ipv4_mapped)
    return str(addr)


def _decode_options(payload, start, end):
    options = []
    pos = start
    while pos < end:
        if end - pos < 4:
            raise EdnsOptionTooShortError()
        code = _u16(payload, pos)
        length = _u16(payload, pos + 2)
        if pos + 4 + length > end:
            raise EdnsDataTooShortError()
        name = opt_code_to_string(code)
        data = parse_option(name, payload[pos + 4:pos + 4 + length])
        options.append(DnsOption(code, name, data))
        pos += 4 + length
    return options, pos


def decode_edns(arcount, start_offset, payload):
    """Scan arcount records for the OPT record; return (EdnsInfo, next_offset)."""
    offset = start_offset
    edns = EdnsInfo()
    found = False

    for _ in range(arcount):
        name, next_offset = parse_labels(offset, payload)
        if len(payload) - next_offset < 10:
            raise AnswerTooShortError()
        rrtype = _u16(payload, next_offset)
        rdata_offset = next_offset + 10

        if rrtype != OPT_TYPE:
            rdlength = _u16(payload, next_offset + 8)
            if len(payload) - rdata_offset < rdlength:
                raise EdnsDataTooShortError()
            offset = rdata_offset + rdlength
            continue

        # RFC 6891: an OPT RR must be the only one in a message
        if found:
            raise EdnsTooManyOptsError()
        if name:
            raise EdnsBadRootDomainError()

        edns.udp_size = _u16(payload, next_offset + 2)
        ttl = _u32(payload, next_offset + 4)
        edns.extended_rcode = ((ttl & 0xFF000000) >> 24) << 4
        edns.version = (ttl & 0x00FF0000) >> 16
        edns.do = (ttl & 0x00008000) >> 15
        edns.z = ttl & 0x7FFF

        rdlength = _u16(payload, next_offset + 8)
        if len(payload) - rdata_offset < rdlength:
            raise EdnsDataTooShortError()

        edns.options, offset = _decode_options(payload, rdata_offset, rdata_offset + rdlength)
        found = True

    return edns, offset


def parse_option(opt_name, opt_data):
    """Render option data as text; options without a decoder render as '-'."""
    if opt_name == "ERRORS":
        return parse_errors(opt_data)
    if opt_name == "CSUBNET":
        return parse_csubnet(opt_data)
    return "-"


def parse_errors(data):
    """Render an Extended DNS Error option (RFC 8914)."""
    if len(data) < 2:
        raise EdnsOptionTooShortError()
    code = _u16(data, 0)
    description = EXTENDED_ERROR_CODES.get(code, "-")
    extra = _text(data[2:]) if len(data) > 2 else "-"
    return f"{code} {description} {extra}"


def parse_csubnet(data):
    """Render a Client Subnet option (RFC 7871) as address/prefix."""
    if len(data) < 4:
        raise EdnsOptionTooShortError()
    family = _u16(data, 0)
    source_prefix = data[2]
    address = bytes(data[4:])
    if family == 1:
        raw = address[:4].ljust(4, b"\x00")
        return f"{ipaddress.IPv4Address(raw)}/{source_prefix}"
    if family == 2:
        raw = address[:16].ljust(16, b"\x00")
        return f"[{_ipv6_text(raw)}]/{source_prefix}"
    raise EdnsCsubnetBadFamilyError()