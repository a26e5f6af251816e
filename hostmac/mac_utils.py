import re

"""
Darwin's ifconfig drops leading zeros from octets so
'00:17:f2:06:e4:2e' can be printed as '0:17:f2:6:e4:2e'.
Octets are 1 or 2 hex digits. The lookarounds stop the
pattern matching a slice of a longer colon string like
an IPv6 address.
"""
MAC_P = r"(?<![0-9a-fA-F:])((?:[0-9a-fA-F]{1,2}:){5}[0-9a-fA-F]{1,2})(?![0-9a-fA-F:])"

# Keywords that precede a hardware address in ifconfig output.
HW_ADDR_P = r"(?:ether|lladdr|HWaddr|address:)\s+" + MAC_P

# Pads single digit octets: '0:ab:cd:e:12:3' -> '00:ab:cd:0e:12:03'.
def standardize(mac):
    if not mac:
        return None

    octets = []
    for octet in mac.split(":"):
        if len(octet) == 1:
            octet = "0" + octet

        octets.append(octet)

    return ":".join(octets)

# First hardware address in a chunk of ifconfig output.
def find_hw_addr(out):
    if not out:
        return None

    hw_addrs = re.findall(HW_ADDR_P, out)
    if not len(hw_addrs):
        return None

    return hw_addrs[0]
