from .settings import *
from .utils import *
from .mac_utils import standardize
from .win_wmi import wmi_query
from .win_registry import hklm_read
from .resolver_defs import MACResolver

"""
Position of the adapter in the binding order. The entries
look like '\\Device\\{GUID}' and SettingID is the GUID. An
adapter that isn't bound anywhere goes after all the rest.
"""
def binding_position(setting_id, bindings):
    if setting_id:
        for i, binding in enumerate(bindings):
            if setting_id.lower() in binding.lower():
                return i

    return len(bindings)

"""
Lowest IP connection metric wins. That's the adapter Windows
would route through. Equal metrics are decided by binding
order which is what the OS uses next.
"""
def best_adapter(adapters, bindings):
    def rank(adapter):
        metric = adapter.IPConnectionMetric
        if metric is None:
            metric = float("inf")

        return (metric, binding_position(adapter.SettingID, bindings))

    return sorted(adapters, key=rank)[0]

class WinMAC(MACResolver):
    def __init__(self, query=wmi_query, reg_read=hklm_read):
        self.query = query
        self.reg_read = reg_read

    def bindings(self):
        return self.reg_read(BIND_ORDER_KEY, BIND_ORDER_VALUE)

    def active_adapters(self):
        adapters = self.query(ADAPTER_WQL)
        return [a for a in adapters if a.MACAddress]

    def macaddress(self):
        bindings = self.bindings()
        adapters = self.active_adapters()
        log(f"wmi active adapters = {adapters}")
        if not len(adapters):
            return None

        if len(adapters) == 1:
            return standardize(adapters[0].MACAddress)

        adapter = best_adapter(adapters, bindings)
        return standardize(adapter.MACAddress)
