import os
import unittest
from hostmac import *

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")

def fixture(*parts):
    with open(os.path.join(FIXTURES, *parts)) as f:
        return f.read()

"""
Stands in for the shell. Maps a command to canned output
and remembers what was run.
"""
class FakeCmd():
    def __init__(self, outputs):
        self.outputs = outputs
        self.ran = []

    def __call__(self, value):
        self.ran.append(value)
        return self.outputs.get(value, "")

class FakeWarn():
    def __init__(self):
        self.msgs = []

    def __call__(self, m):
        self.msgs.append(m)

# version, default iface, real macaddress, fallback macaddress
TEST_CASES = [
    ["9.8.0", "en0", "00:17:f2:06:e4:2e", "00:17:f2:06:e4:2e"],
    ["10.3.0", "en0", "00:17:f2:06:e3:c2", "00:17:f2:06:e3:c2"],
    ["10.6.4", "en1", "58:b0:35:7f:25:b3", "58:b0:35:fa:08:b1"],
    ["10.6.6_dualstack", "en1", "00:25:00:48:19:ef", "00:25:4b:ca:56:72"],
]

def darwin_fixtures(version, if_name):
    name = "darwin_" + version.replace(".", "_")
    return {
        "netstat": fixture("netstat", name),
        "ifconfig": fixture("ifconfig", name),
        "ifconfig_if": fixture("ifconfig", f"{name}_{if_name}"),
    }

class TestBSDMAC(unittest.TestCase):
    def test_default_interface(self):
        for version, if_name, _, _ in TEST_CASES:
            with self.subTest(version=version):
                outs = darwin_fixtures(version, if_name)
                fake_cmd = FakeCmd({NETSTAT_CMD: outs["netstat"]})
                resolver = BSDMAC(cmd=fake_cmd, warn=FakeWarn())
                self.assertEqual(resolver.default_interface(), if_name)
                self.assertEqual(fake_cmd.ran, [NETSTAT_CMD])

    def test_macaddress_of_default_interface(self):
        for version, if_name, mac, _ in TEST_CASES:
            with self.subTest(version=version):
                outs = darwin_fixtures(version, if_name)
                fake_cmd = FakeCmd({
                    NETSTAT_CMD: outs["netstat"],
                    f"{IFCONFIG_CMD} {if_name}": outs["ifconfig_if"],
                })
                fake_warn = FakeWarn()
                resolver = BSDMAC(cmd=fake_cmd, warn=fake_warn)
                self.assertEqual(resolver.macaddress(), mac)
                self.assertEqual(fake_warn.msgs, [])
                self.assertNotIn(f"{IFCONFIG_CMD} -a", fake_cmd.ran)

    def test_macaddress_without_default_route(self):
        for version, if_name, _, fallback_mac in TEST_CASES:
            with self.subTest(version=version):
                outs = darwin_fixtures(version, if_name)
                fake_cmd = FakeCmd({
                    NETSTAT_CMD: fixture("netstat", "darwin_11_no_default"),
                    f"{IFCONFIG_CMD} -a": outs["ifconfig"],
                })
                fake_warn = FakeWarn()
                resolver = BSDMAC(cmd=fake_cmd, warn=fake_warn)
                self.assertEqual(resolver.macaddress(), fallback_mac)
                self.assertEqual(
                    fake_warn.msgs,
                    ["Could not find a default route. Using first non-loopback interface"]
                )

    def test_fallback_skips_loopback_with_address(self):
        out = "lo0: flags=8049<UP,LOOPBACK,RUNNING> mtu 16384\n"
        out += "\tether 00:00:00:00:00:01\n"
        out += "\tinet 127.0.0.1 netmask 0xff000000\n"
        out += "gif0: flags=8010<POINTOPOINT,MULTICAST> mtu 1280\n"
        out += "em0: flags=8843<UP,BROADCAST,RUNNING> mtu 1500\n"
        out += "\tether 8:0:27:a:b:c\n"
        out += "em1: flags=8843<UP,BROADCAST,RUNNING> mtu 1500\n"
        out += "\tether 08:00:27:ff:ff:ff\n"

        fake_cmd = FakeCmd({f"{IFCONFIG_CMD} -a": out})
        resolver = BSDMAC(cmd=fake_cmd, warn=FakeWarn())
        self.assertEqual(resolver.macaddress(), "08:00:27:0a:0b:0c")

    def test_no_address_found(self):
        # Default route but ifconfig has no ether line.
        fake_cmd = FakeCmd({
            NETSTAT_CMD: "default 10.0.0.1 UGSc 1 0 tun0\n",
            f"{IFCONFIG_CMD} tun0": "tun0: flags=8051<UP,POINTOPOINT> mtu 1500\n",
        })
        fake_warn = FakeWarn()
        resolver = BSDMAC(cmd=fake_cmd, warn=fake_warn)
        self.assertIsNone(resolver.macaddress())
        self.assertEqual(fake_warn.msgs, [])

        # No default route and only a loopback.
        fake_cmd = FakeCmd({
            f"{IFCONFIG_CMD} -a": "lo0: flags=8049<UP,LOOPBACK> mtu 16384\n",
        })
        resolver = BSDMAC(cmd=fake_cmd, warn=FakeWarn())
        self.assertIsNone(resolver.macaddress())

    def test_cmd_errors_propagate(self):
        def broken_cmd(value):
            raise ErrorCmdFailed(f"cmd {value} exited with 1")

        resolver = BSDMAC(cmd=broken_cmd, warn=FakeWarn())
        with self.assertRaises(ErrorCmdFailed):
            resolver.macaddress()

    def test_ifconfig_blocks_keep_order(self):
        out = fixture("ifconfig", "darwin_10_6_4")
        names = [if_name for if_name, _ in parse_ifconfig_blocks(out)]
        self.assertEqual(names, ["lo0", "gif0", "stf0", "en0", "fw0", "en1"])
        self.assertTrue(is_loopback("lo0"))
        self.assertFalse(is_loopback("en0"))
        self.assertFalse(is_loopback("lagg0"))

    def test_ifconfig_command_escapes_name(self):
        resolver = BSDMAC(cmd=FakeCmd({}), warn=FakeWarn())
        self.assertEqual(
            resolver.ifconfig_command("en0; rm -rf x"),
            f"{IFCONFIG_CMD} 'en0; rm -rf x'"
        )
        self.assertEqual(resolver.ifconfig_command(), f"{IFCONFIG_CMD} -a")

if __name__ == '__main__':
    unittest.main()
