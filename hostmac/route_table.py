from .settings import *

"""
Parses 'netstat -rn' output from BSD-style systems.

Darwin prints a table per address family. Each one has its
own heading and the interface column moves between them
(and between OS versions) so the heading is used to find
it. Lines that don't have enough fields are ignored.

Routing tables

Internet:
Destination        Gateway            Flags        Refs      Use   Netif Expire
default            192.168.1.1        UGSc           38        0     en1
"""
def parse_netstat_routes(out):
    table = []
    netif_col = NETIF_COLUMN
    for line in out.splitlines():
        fields = line.split()
        if not len(fields):
            continue

        # Start of a new table section.
        if fields[0] == "Destination":
            netif_col = NETIF_COLUMN
            for heading in NETIF_HEADINGS:
                if heading in fields:
                    netif_col = fields.index(heading)
                    break

            continue

        # Titles like 'Internet:' and short rows.
        if len(fields) <= netif_col:
            continue

        table.append({
            "dest": fields[0],
            "gw": fields[1],
            "flags": fields[2],
            "if": fields[netif_col]
        })

    return table

def find_rt_entry(dest, table):
    for entry in table:
        if entry["dest"] != dest:
            continue

        return entry

# Interface name of the first default route or ''.
def get_default_iface_from_netstat(out):
    if not out:
        return ""

    table = parse_netstat_routes(out)
    entry = find_rt_entry("default", table)
    if entry is None:
        return ""

    return entry["if"]
