import platform
from .errors import *
from .settings import *
from .utils import *
from .bsd_mac import BSDMAC
from .win_mac import WinMAC
from .netiface_mac import NetifaceMAC

"""
Picks the resolver for the running OS. Any keyword args
are passed on so accessors can be swapped out.
"""
def get_mac_resolver(os_name=None, **kwargs):
    os_name = os_name or platform.system()
    log(f"mac resolver for os = {os_name}")
    if os_name == "Windows":
        return WinMAC(**kwargs)

    if os_name in BSD_PLATFORMS:
        return BSDMAC(**kwargs)

    if os_name == "Linux":
        return NetifaceMAC(**kwargs)

    raise ErrorUnsupportedPlatform(f"no mac resolver for {os_name}")

def get_macaddress(os_name=None):
    return get_mac_resolver(os_name).macaddress()
