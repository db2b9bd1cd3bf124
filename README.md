# dnsdecode

A small, dependency-free decoder for DNS messages in wire format. It is
written to cope with hostile or broken packets. Every bounds problem, bad
compression pointer or overlong name raises an exception. The decoder never
reads past the data.

## Installation

```
pip install .
```

## What it decodes

- The 12-byte header (`DnsHeader`): ID, QR, opcode, AA, TC, RD, RA, Z, AD,
  CD, rcode and the four section counts.
- Question names and types, with name compression. Compression pointers
  must point to earlier data, so a packet cannot make the decoder loop. A
  name longer than 254 bytes, separators included, is rejected.
- Answer, authority and additional records, each as a `DnsAnswer` with
  `name`, `rdatatype`, `rrclass`, `ttl` and `rdata`. The RDATA of A, AAAA,
  CNAME, MX, SRV, NS, TXT, PTR and SOA records is rendered as text. Other
  record types come out as `-`. OPT records are left out of the record
  lists.
- The EDNS(0) OPT record, as an `EdnsInfo` with `udp_size`,
  `extended_rcode`, `version`, `do`, `z` and `options`. Each option is a
  `DnsOption` with `code`, `name` and `data`. The decoder renders Extended
  DNS Errors as `"<code> <description> <extra text or ->"`. It renders
  Client Subnet as `address/prefix`, with IPv6 addresses in brackets. Other
  options come out as `-`. A second OPT record, or an OPT record whose
  name is not the root, is an error.

## Usage

Decode a whole message at once:

```python
from dnsdecode.wire import decode_header
from dnsdecode.payload import decode_payload

header = decode_header(packet)
result = decode_payload(packet, header)

print(result.id, result.qname, result.qtype, result.rcode, result.flags)
for answer in result.answers:
    print(answer.name, answer.rdatatype, answer.ttl, answer.rdata)
print(result.edns.udp_size, result.edns.options)
```

`decode_payload` returns a `DecodedPayload`. Its fields are `answers`,
`nameservers` (the authority section) and `records` (the additional
section). For DNS UPDATE messages (opcode 5) `operation` is set to
`"UPDATE_QUERY"` or `"UPDATE_RESPONSE"`. For other messages it is `None`.

The header and the later sections can fail separately:

- `decode_header` raises `HeaderTooShortError` if fewer than 12 bytes are
  present.
- `decode_payload` raises a `DecodingError` if a section cannot be decoded.

A `DecodingError` carries three attributes:

- `part` names the failed section: `"query"`, `"answer records"`,
  `"authority records"`, `"additional records"` or `"edns options"`.
- `cause` holds the original error, which is also the exception's
  `__cause__`.
- `partial` holds the `DecodedPayload` decoded so far, with `malformed`
  set to `True`.

```python
from dnsdecode.errors import DecodingError, LabelInvalidPointerError

try:
    result = decode_payload(packet, header)
except DecodingError as exc:
    print(exc.part, isinstance(exc.cause, LabelInvalidPointerError))
    print(exc.partial.malformed)
```

The pieces can also be called on their own:

```python
from dnsdecode.wire import decode_question, decode_answers, parse_labels
from dnsdecode.edns import decode_edns

qname, qtype, offset = decode_question(1, packet)
answers, offset = decode_answers(2, offset, packet)
edns, offset = decode_edns(1, offset, packet)
name, end = parse_labels(12, packet)
```

When a message has several questions, `decode_question` returns the name
and type of the last one, together with the offset just past them all.

The per-type RDATA renderers are in `dnsdecode.wire`:

- `parse_a`, `parse_aaaa` and `parse_txt` take the RDATA bytes.
- `parse_cname`, `parse_mx`, `parse_srv`, `parse_ns`, `parse_ptr` and
  `parse_soa` take an offset into the message.
- `parse_rdata` dispatches to one of them by type name.

The option renderers `parse_option`, `parse_errors` and `parse_csubnet`
are in `dnsdecode.edns`.

Code tables are exposed through `rdatatype_to_string`, `rcode_to_string`
and `opt_code_to_string` in `dnsdecode.codes`. Unknown codes map to
`"UNKNOWN"`.

## Errors

Every decoding failure derives from `dnsdecode.errors.DecodeError`, which
is a `ValueError`. Catch that type to treat all malformed packets alike.
To handle a particular case, catch one of the subclasses instead, such as
`LabelInvalidPointerError`, `RdataTooShortError` or
`EdnsOptionTooShortError`.

## What it does not do

This is a library only. It has no command-line tool. It does not capture
traffic, read dnstap or pcap streams, or send queries. It does not encode
messages. The caller must supply the raw DNS payload as bytes.

## Running the tests

```
pip install ".[test]"
pytest
```