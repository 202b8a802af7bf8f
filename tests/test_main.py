import tempfile
import unittest
from pathlib import Path
from unittest import mock

import psutil

from porttraffic import main as cli
from porttraffic.config import CFG, init_cfg_from_args, parse_ports
from porttraffic.render import RenderReport
from porttraffic.session import ObservationSession

from .helpers import conn


class TestConfig(unittest.TestCase):
    def test_defaults_sample_every_second_for_a_minute(self):
        cfg = init_cfg_from_args(cli.parse_args([]))
        self.assertEqual((cfg.window, cfg.interval, cfg.scale), (60.0, 1.0, 1024))
        self.assertEqual((cfg.width, cfg.height), (32.0, 16.0))
        self.assertEqual(cfg.kind, 'all')
        self.assertEqual(cfg.ports, set())
        self.assertEqual(cfg.out_dir, Path('.'))

    def test_parse_ports_ignores_bad_entries(self):
        self.assertEqual(parse_ports('80, 443,,x,70000,0'), {80, 443})

    def test_out_dir_is_created(self):
        with tempfile.TemporaryDirectory() as d:
            target = Path(d) / 'charts'
            cfg = init_cfg_from_args(cli.parse_args(['--out-dir', str(target), '--ports', '22']))
            self.assertTrue(target.is_dir())
            self.assertEqual(cfg.out_dir, target.resolve())
            self.assertEqual(cfg.ports, {22})

    def test_ports_filter_with_nothing_valid_is_rejected(self):
        with self.assertRaises(SystemExit):
            cli.parse_args(['--ports', 'htps'])

    def test_ports_filter_never_widens_to_all(self):
        cfg = init_cfg_from_args(cli.parse_args(['--ports', '443,htps']))
        self.assertEqual(cfg.ports, {443})
        table = [conn(80, 1), conn(443, 2), conn(22, 3)]
        self.assertEqual(ObservationSession(cfg, list_connections=lambda: table).seed_ports(), [443])

    def test_non_positive_window_rejected(self):
        with self.assertRaises(SystemExit):
            cli.parse_args(['--window', '0'])


class TestMain(unittest.TestCase):
    @mock.patch.object(cli, 'ObservationSession')
    def test_enumeration_failure_exits_1(self, Session):
        Session.return_value.seed_ports.side_effect = psutil.AccessDenied()
        self.assertEqual(cli.main([]), 1)

    @mock.patch.object(cli, 'ObservationSession')
    def test_render_failure_exits_1(self, Session):
        Session.return_value.seed_ports.return_value = [80]
        Session.return_value.observe.return_value = {}
        report = RenderReport()
        report.failures.append(mock.Mock())
        Session.return_value.render.return_value = report
        self.assertEqual(cli.main(['--window', '1']), 1)

    @mock.patch.object(cli, 'ObservationSession')
    def test_success_exits_0(self, Session):
        Session.return_value.seed_ports.return_value = [80]
        Session.return_value.observe.return_value = {}
        Session.return_value.render.return_value = RenderReport()
        self.assertEqual(cli.main([]), 0)
        cfg = Session.call_args[0][0]
        self.assertIsInstance(cfg, CFG)

    @mock.patch.object(cli, 'ObservationSession')
    def test_interrupt_stops_monitors(self, Session):
        Session.return_value.seed_ports.return_value = [80]
        Session.return_value.observe.side_effect = KeyboardInterrupt
        self.assertEqual(cli.main([]), 130)
        Session.return_value.shutdown.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
