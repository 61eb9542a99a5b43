import tempfile
import unittest
from pathlib import Path

from fleet_health.core.errors import ServerListError
from fleet_health.core.server_list import read_server_list


class TestReadServerList(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "server.txt"

    def tearDown(self):
        self.tmp.cleanup()

    def test_one_address_per_line(self):
        self.path.write_text("10.0.0.1:8080\n10.0.0.2\nhost.example:9000\n", encoding="utf-8")
        self.assertEqual(
            read_server_list(self.path), ["10.0.0.1:8080", "10.0.0.2", "host.example:9000"]
        )

    def test_whitespace_trimmed(self):
        self.path.write_text("  a:1 \r\n\tb:2\r\n\n   \n", encoding="utf-8")
        self.assertEqual(read_server_list(self.path), ["a:1", "b:2"])

    def test_duplicates_kept(self):
        self.path.write_text("a\na\n", encoding="utf-8")
        self.assertEqual(read_server_list(str(self.path)), ["a", "a"])

    def test_empty_file(self):
        self.path.write_text("", encoding="utf-8")
        self.assertEqual(read_server_list(self.path), [])

    def test_missing_file(self):
        with self.assertRaises(ServerListError):
            read_server_list(Path(self.tmp.name) / "nope.txt")

    def test_not_utf8(self):
        self.path.write_bytes(b"\xff\xfe\xfa")
        with self.assertRaises(ServerListError):
            read_server_list(self.path)


if __name__ == "__main__":
    unittest.main()
