"""Lookup tables for DNS record types, response codes and EDNS option codes."""


def _numbered(*runs):
    """Build a code-to-name table from runs of consecutive codes."""
    return {
        start + index: name
        for start, names in runs
        for index, name in enumerate(names.split())
    }


RDATATYPES = _numbered(
    (
        0,
        "NONE A NS MD MF CNAME SOA MB MG MR NULL WKS PTR HINFO MINFO MX TXT RP "
        "AFSDB X25 ISDN RT NSAP NSAP_PTR SIG KEY PX GPOS AAAA LOC NXT",
    ),
    (33, "SRV"),
    (35, "NAPTR KX CERT A6 DNAME"),
    (41, "OPT APL DS SSHFP IPSECKEY RRSIG NSEC DNSKEY DHCID NSEC3 NSEC3PARAM TSLA SMIMEA"),
    (55, "HIP NINFO"),
    (59, "CDS CDNSKEY OPENPGPKEY CSYNC"),
    (64, "SVCB HTTPS"),
    (99, "SPF"),
    (103, "UNSPEC"),
    (108, "EUI48 EUI64"),
    (249, "TKEY TSIG IXFR AXFR MAILB MAILA ANY URI CAA AVC AMTRELAY"),
    (32768, "TA DLV"),
)

RCODES = _numbered(
    (0, "NOERROR FORMERR SERVFAIL NXDOMAIN NOIMP REFUSED YXDOMAIN YXRRSET NXRRSET NOTAUTH NOTZONE DSOTYPENI"),
    (16, "BADSIG BADKEY BADTIME BADMODE BADNAME BADALG BADTRUNC BADCOOKIE"),
)

OPT_CODES = _numbered(
    (3, "NSID"),
    (8, "CSUBNET EXPIRE COOKIE KEEPALIVE PADDING"),
    (15, "ERRORS"),
)

EXTENDED_ERROR_CODES = dict(
    enumerate(
        (
            "Other",
            "Unsupported DNSKEY Algorithm",
            "Unsupported DS Digest Type",
            "Stale Answer",
            "Forged Answer",
            "DNSSEC Indeterminate",
            "DNSSEC Bogus",
            "Signature Expired",
            "Signature Not Yet Valid",
            "DNSKEY Missing",
            "RRSIGs Missing",
            "No Zone Key Bit Set",
            "NSEC Missing",
            "Cached Error",
            "Not Ready",
            "Blocked",
            "Censored",
            "Filtered",
            "Prohibited",
            "Stale NXDOMAIN Answer",
            "Not Authoritative",
            "Not Supported",
            "No Reachable Authority",
            "Network Error",
            "Invalid Data",
        )
    )
)

UNKNOWN = "UNKNOWN"


def rdatatype_to_string(rrtype):
    """Return the mnemonic of a record type, or UNKNOWN."""
    return RDATATYPES.get(rrtype, UNKNOWN)


def rcode_to_string(rcode):
    """Return the mnemonic of a response code, or UNKNOWN."""
    return RCODES.get(rcode, UNKNOWN)


def opt_code_to_string(code):
    """Return the mnemonic of an EDNS option code, or UNKNOWN."""
    return OPT_CODES.get(code, UNKNOWN)