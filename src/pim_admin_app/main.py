from __future__ import annotations

import argparse
import logging
from concurrent.futures import wait

from pim_admin_sdk import load_config

from pim_admin_app.app.bootstrap import AdminShell
from pim_admin_app.app.state import Route
from pim_admin_app.config import load_app_config


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pim-admin", description="PIM admin console (headless)")
    parser.add_argument("--email", help="Login email (defaults to the demo account)")
    parser.add_argument("--password", help="Login password (defaults to the demo account)")
    parser.add_argument("--env-file", default=None, help="Optional .env file with PIM_* settings")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    shell = AdminShell(load_config(args.env_file), app_config=load_app_config(args.env_file))
    shell.start()
    login = shell.login_view
    if args.email is not None:
        login.email = args.email
    if args.password is not None:
        login.password = args.password

    try:
        future = login.submit()
        if future is not None:
            wait([future])
        if shell.state.route is not Route.DASHBOARD or shell.dashboard_view is None:
            print(f"Login failed: {login.error_message}")
            return 1

        dashboard = shell.dashboard_view
        if dashboard.pending_load is not None:
            wait([dashboard.pending_load])
        for alert in dashboard.notifications.messages:
            print(f"{alert['title']}: {alert['message']}")
        print(dashboard.status_message)
        for row in dashboard.render()["table"]["rows"]:
            print(f"{row['id']}\t{row['sku']}\t{row['name']}\t{row['price']}\t{row['quantity']}\t{row['status']}")
        return 0
    finally:
        shell.exit()


if __name__ == "__main__":
    raise SystemExit(run())
