"""Render and install a systemd service + timer that runs the briefing daily."""

import getpass
import os
import shutil
import subprocess
import sys

from morning.config import load_settings
from morning.scheduler.daily import parse_briefing_time

SERVICE_NAME = "good_morning"
UNIT_DIR = "/etc/systemd/system"

SERVICE_TEMPLATE = """[Unit]
Description=Good Morning Service

[Service]
Type=simple
ExecStart={exec_start}
User={user}

[Install]
WantedBy=multi-user.target
"""

TIMER_TEMPLATE = """[Unit]
Description=Runs Good Morning Service daily at {briefing_time}

[Timer]
OnCalendar=*-*-* {hour:02d}:{minute:02d}:00
Persistent=true

[Install]
WantedBy=timers.target
"""


def default_exec_start():
    script = shutil.which("good-morning")
    if script:
        return script
    return f"{sys.executable} -m morning.main"


def render_units(exec_start, user, briefing_time):
    """Return (service_text, timer_text)."""
    hour, minute = parse_briefing_time(briefing_time)
    service = SERVICE_TEMPLATE.format(exec_start=exec_start, user=user)
    timer = TIMER_TEMPLATE.format(briefing_time=f"{hour:02d}:{minute:02d}", hour=hour, minute=minute)
    return service, timer


def install_service(briefing_time, name=SERVICE_NAME, unit_dir=UNIT_DIR,
                    exec_start=None, user=None, enable=True, run=subprocess.run):
    """Write both unit files and (optionally) enable and start the timer."""
    service, timer = render_units(exec_start or default_exec_start(), user or getpass.getuser(), briefing_time)

    service_path = os.path.join(unit_dir, f"{name}.service")
    timer_path = os.path.join(unit_dir, f"{name}.timer")
    for path, text in ((service_path, service), (timer_path, timer)):
        print(f"Creating {path}...")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)

    if enable:
        print("Reloading systemctl daemon...")
        run(["systemctl", "daemon-reload"], check=True)
        print("Enabling and starting the timer...")
        run(["systemctl", "enable", f"{name}.timer"], check=True)
        run(["systemctl", "start", f"{name}.timer"], check=True)

    return service_path, timer_path


def main():
    settings = load_settings()
    try:
        install_service(settings.briefing_time)
    except (OSError, ValueError, subprocess.CalledProcessError) as e:
        print(f"ERROR: {e}")
        return 1
    print(f"Setup complete. The briefing will run daily at {settings.briefing_time}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
