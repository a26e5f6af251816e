from .errors import *
from .utils import *

"""
Reads a value under HKEY_LOCAL_MACHINE. REG_MULTI_SZ values
come back as a list of strings. Anything else is wrapped in
a list so callers always get an ordered sequence.
"""
def hklm_read(key, value):
    try:
        from winregistry import WinRegistry
        with WinRegistry() as reg:
            out = reg.read_entry(key, value).value
    except Exception as e:
        log_exception()
        raise ErrorRegistryRead(f"could not read {key}\\{value}: {e}")

    if out is None:
        return []

    if isinstance(out, (list, tuple)):
        return list(out)

    return [out]
