from __future__ import annotations
import argparse, logging, sys
from typing import List, Optional

import psutil

from .config import CFG, CONN_KINDS, init_cfg_from_args, parse_ports
from .session import ObservationSession

log = logging.getLogger("porttraffic")

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    d = CFG()
    ap = argparse.ArgumentParser(prog="porttraffic",
                                 description='Sample per-port process io for a fixed window and chart the per-second deltas')
    ap.add_argument('--window', type=float, default=d.window, help='observation window in seconds')
    ap.add_argument('--interval', type=float, default=d.interval, help='seconds between samples')
    ap.add_argument('--out-dir', type=str, default=None, help='directory for <port>-Received.png / <port>-Sent.png (default: cwd)')
    ap.add_argument('--ports', type=str, default='', help='comma-separated local ports to watch (default: all)')
    ap.add_argument('--kind', choices=CONN_KINDS, default=d.kind, help='psutil connection kind to enumerate')
    ap.add_argument('--dpi', type=int, default=d.dpi)
    ap.add_argument('-v', '--verbose', action='store_true')
    args = ap.parse_args(argv)
    if args.window <= 0 or args.interval <= 0:
        ap.error('--window and --interval must be positive')
    if args.ports:
        # a filter that parses to nothing must not widen to every port
        args.ports = parse_ports(args.ports)
        if not args.ports:
            ap.error('--ports: no valid port given')
    return args

def setup_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root = logging.getLogger("porttraffic")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    cfg = init_cfg_from_args(args)
    session = ObservationSession(cfg)

    try:
        ports = session.seed_ports()
    except psutil.Error as e:
        log.error("cannot enumerate connections: %s", e)
        return 1
    if not ports:
        log.warning("no local ports to watch")
        return 0

    try:
        snapshot = session.observe(ports)
    except KeyboardInterrupt:
        session.shutdown()
        return 130

    report = session.render(snapshot)
    log.info("%d chart(s) written to %s, %d skipped, %d failed",
             len(report.written), cfg.out_dir.resolve(), len(report.skipped), len(report.failures))
    return 0 if report.ok else 1

if __name__ == '__main__':
    raise SystemExit(main())
