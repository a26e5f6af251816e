from .errors import *
from .utils import *

"""
One row of Win32_NetworkAdapterConfiguration. A missing
MACAddress means the config isn't bound to a device.
"""
class AdapterRecord():
    def __init__(self, MACAddress=None, IPConnectionMetric=None, SettingID=None):
        self.MACAddress = MACAddress
        self.IPConnectionMetric = IPConnectionMetric
        self.SettingID = SettingID

    @staticmethod
    def from_wmi(obj):
        return AdapterRecord(
            MACAddress=getattr(obj, "MACAddress", None),
            IPConnectionMetric=getattr(obj, "IPConnectionMetric", None),
            SettingID=getattr(obj, "SettingID", None),
        )

    def __eq__(self, other):
        if not isinstance(other, AdapterRecord):
            return NotImplemented

        return (
            self.MACAddress == other.MACAddress and
            self.IPConnectionMetric == other.IPConnectionMetric and
            self.SettingID == other.SettingID
        )

    def __repr__(self):
        return "<AdapterRecord mac={} metric={} id={}>".format(
            self.MACAddress,
            self.IPConnectionMetric,
            self.SettingID
        )

def wmi_query(wql):
    try:
        import wmi
        rows = wmi.WMI().query(wql)
    except Exception as e:
        log_exception()
        raise ErrorWMIQuery(f"wmi query {wql} failed: {e}")

    return [AdapterRecord.from_wmi(row) for row in rows]
