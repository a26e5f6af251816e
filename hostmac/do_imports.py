from .errors import *
from .settings import *
from .utils import log, warn, log_exception
from .cmd_tools import cmd, nix_arg_escape
from .mac_utils import *
from .route_table import *
from .resolver_defs import MACResolver
from .bsd_mac import *
from .win_registry import hklm_read
from .win_wmi import AdapterRecord, wmi_query
from .win_mac import *
from .netiface_mac import *
from .resolver import get_mac_resolver, get_macaddress
