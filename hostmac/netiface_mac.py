import re
from .settings import *
from .utils import *
from .mac_utils import standardize
from .resolver_defs import MACResolver

def get_netifaces():
    import netifaces
    return netifaces

# Name of the interface with the IPv4 default gateway or ''.
def get_default_iface(netifaces):
    gws = netifaces.gateways()
    default = gws.get("default", {})
    if netifaces.AF_INET not in default:
        return ""

    _, if_name = default[netifaces.AF_INET][:2]
    return if_name

def get_link_addr(netifaces, if_name):
    addr_infos = netifaces.ifaddresses(if_name)
    if netifaces.AF_LINK not in addr_infos:
        return None

    for addr_info in addr_infos[netifaces.AF_LINK]:
        if addr_info.get("addr"):
            return addr_info["addr"]

    return None

"""
Linux and anything else netifaces supports. Same lookup
order as the BSD resolver: the default gateway interface
first, otherwise the first non-loopback interface with a
link address.
"""
class NetifaceMAC(MACResolver):
    def __init__(self, netifaces=None, warn=warn):
        self.netifaces = netifaces
        self.warn = warn

    def default_interface(self):
        return get_default_iface(self.get_netifaces())

    def get_netifaces(self):
        if self.netifaces is None:
            self.netifaces = get_netifaces()

        return self.netifaces

    def macaddress(self):
        netifaces = self.get_netifaces()
        if_name = self.default_interface()
        if len(if_name):
            return standardize(get_link_addr(netifaces, if_name))

        self.warn(NO_DEFAULT_ROUTE_WARNING)
        for if_name in netifaces.interfaces():
            if re.match(LOOPBACK_P, if_name) is not None:
                continue

            link_addr = get_link_addr(netifaces, if_name)
            if link_addr:
                return standardize(link_addr)

        return None
