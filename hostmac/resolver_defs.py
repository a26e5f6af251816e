"""
Every platform resolver exposes the same interface so the
caller only picks one once and then calls macaddress().
"""
class MACResolver():
    # Canonical MAC of the primary interface or None.
    def macaddress(self):
        raise NotImplementedError("macaddress() not implemented.")

    def __repr__(self):
        return f"<{type(self).__name__}>"
