# Defines all custom exceptions.

# A command couldn't be started or exited non-zero.
class ErrorCmdFailed(Exception):
    pass

# Registry key or value couldn't be read.
class ErrorRegistryRead(Exception):
    pass

# WMI isn't available or the query failed.
class ErrorWMIQuery(Exception):
    pass

# No MAC resolver exists for this OS.
class ErrorUnsupportedPlatform(Exception):
    pass
