# Seconds to wait for an external command.
CMD_TIMEOUT = 10

# BSD-style route and interface tools.
NETSTAT_CMD = "/usr/sbin/netstat -rn"
IFCONFIG_CMD = "/sbin/ifconfig"

# Column of the interface name in 'netstat -rn' default routes
# when no heading has been seen. Older Darwin prints:
# Destination Gateway Flags Refs Use Netif Expire
NETIF_COLUMN = 5
# Darwin and FreeBSD say Netif, OpenBSD Iface, NetBSD Interface.
NETIF_HEADINGS = ["Netif", "Iface", "Interface"]

# lo, lo0, lo1 ...
LOOPBACK_P = r"^lo[0-9]*$"

NO_DEFAULT_ROUTE_WARNING = "Could not find a default route. Using first non-loopback interface"

"""
Windows keeps the adapter binding order as a REG_MULTI_SZ
list of '\\Device\\{GUID}' strings. The GUID matches the
SettingID of the adapter config in WMI.
"""
BIND_ORDER_KEY = r"HKEY_LOCAL_MACHINE\SYSTEM\CurrentControlSet\Services\Tcpip\Linkage"
BIND_ORDER_VALUE = "Bind"

ADAPTER_WQL = "SELECT MACAddress, IPConnectionMetric, SettingID FROM Win32_NetworkAdapterConfiguration WHERE IPEnabled = True"

# Platform.system() names that use netstat + ifconfig.
BSD_PLATFORMS = ["Darwin", "FreeBSD", "OpenBSD", "NetBSD", "DragonFly"]
