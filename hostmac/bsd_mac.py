import re
from .settings import *
from .utils import *
from .cmd_tools import cmd, nix_arg_escape
from .mac_utils import standardize, find_hw_addr
from .route_table import get_default_iface_from_netstat
from .resolver_defs import MACResolver

# Header lines start in the first column: 'en0: flags=8863<UP...'
IFCONFIG_HEADER_P = r"^([^\s:]+):"

def is_loopback(if_name):
    return re.match(LOOPBACK_P, if_name) is not None

"""
Splits 'ifconfig -a' output into [if_name, block_text] pairs
while keeping the order they were printed in. Any text before
the first header isn't part of a block and is dropped.
"""
def parse_ifconfig_blocks(out):
    blocks = []
    for line in out.splitlines():
        header = re.findall(IFCONFIG_HEADER_P, line)
        if len(header):
            blocks.append([header[0], line])
            continue

        if len(blocks):
            blocks[-1][1] += "\n" + line

    return blocks

# Address of the first non-loopback block that has one.
def first_non_loopback_hw_addr(out):
    for if_name, block in parse_ifconfig_blocks(out):
        if is_loopback(if_name):
            continue

        hw_addr = find_hw_addr(block)
        if hw_addr is not None:
            return hw_addr

    return None

"""
Darwin and the BSDs. The default interface comes from
the route table and its address from ifconfig. Both
commands go through the cmd function passed in so
canned output can be used instead of a real host.
"""
class BSDMAC(MACResolver):
    def __init__(self, cmd=cmd, warn=warn):
        self.cmd = cmd
        self.warn = warn

    def netstat_command(self):
        return NETSTAT_CMD

    def ifconfig_command(self, if_name=None):
        if if_name:
            return f"{IFCONFIG_CMD} {nix_arg_escape(if_name)}"

        return f"{IFCONFIG_CMD} -a"

    def default_interface(self):
        out = self.cmd(self.netstat_command())
        if_name = get_default_iface_from_netstat(out)
        log(f"netstat default if = '{if_name}'")
        return if_name

    def macaddress(self):
        if_name = self.default_interface()
        if len(if_name):
            out = self.cmd(self.ifconfig_command(if_name))
            return standardize(find_hw_addr(out))

        # No default route so take what ifconfig lists first.
        self.warn(NO_DEFAULT_ROUTE_WARNING)
        out = self.cmd(self.ifconfig_command())
        return standardize(first_non_loopback_hw_addr(out))
