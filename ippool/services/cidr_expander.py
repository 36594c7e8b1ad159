import ipaddress
import re
from typing import List

from ..errors import InvalidCidrError, MaskTooWideError, Ok, Result
from ..schemas.ip_address import AddressStatus, IPAddressRecord

MINIMUM_MASK_BITS = 24

# a.b.c.d/n with no netmask or bare-address shorthand
_CIDR_PATTERN = re.compile(r"(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})/(\d{1,2})", re.ASCII)


def parse_cidr(cidr: str) -> Result[ipaddress.IPv4Network]:
    """
    Parse ``A.B.C.D/N`` into its network.

    Host bits are allowed and masked off, so ``10.0.0.5/30`` is the block
    ``10.0.0.4/30``. Octets are read as plain integers, so leading zeros are
    accepted (``010.0.0.0/30`` is ``10.0.0.0/30``). Surrounding whitespace
    is not.
    """
    match = _CIDR_PATTERN.fullmatch(cidr) if isinstance(cidr, str) else None
    if not match:
        return InvalidCidrError(f"Could not parse [{cidr}]")

    *octets, prefix = (int(group) for group in match.groups())
    if any(octet > 255 for octet in octets):
        return InvalidCidrError(f"Could not parse [{cidr}]: octet out of range [0,255]")
    try:
        return Ok(ipaddress.IPv4Network((".".join(map(str, octets)), prefix), strict=False))
    except ValueError as e:
        return InvalidCidrError(f"Could not parse [{cidr}]: {e}")


def expand_cidr(cidr: str, minimum_mask_bits: int = MINIMUM_MASK_BITS) -> Result[List[IPAddressRecord]]:
    """
    Expand a CIDR block into every address it covers, network and broadcast
    included, in ascending order and all available.
    """
    parsed = parse_cidr(cidr)
    if not isinstance(parsed, Ok):
        return parsed

    network = parsed.value
    if network.prefixlen < minimum_mask_bits:
        return MaskTooWideError(f"Value [{network.prefixlen}] not in range [{minimum_mask_bits},32]")

    # Iterating the network yields all addresses; hosts() would drop the ends
    return Ok([
        IPAddressRecord(address=str(ip), status=AddressStatus.available)
        for ip in network
    ])
