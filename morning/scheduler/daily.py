import asyncio
import sys
from datetime import datetime, timedelta

from morning.config import load_settings
from morning.main import install_signal_handlers, supervise


def parse_briefing_time(value):
    """'HH:MM' -> (hour, minute). Raises ValueError on anything else."""
    try:
        hour_str, minute_str = value.split(":")
        hour, minute = int(hour_str), int(minute_str)
    except ValueError:
        raise ValueError(f"BRIEFING_TIME must look like HH:MM, got {value!r}") from None
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise ValueError(f"BRIEFING_TIME out of range: {value!r}")
    return hour, minute


def next_run(briefing_time, now):
    """Next occurrence of briefing_time strictly after now."""
    hour, minute = parse_briefing_time(briefing_time)
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return target


def seconds_until(briefing_time, now):
    return (next_run(briefing_time, now) - now).total_seconds()


async def run_daily(settings, run_once=supervise, clock=datetime.now):
    """Sleep until the briefing time, run once, repeat until interrupted."""
    parse_briefing_time(settings.briefing_time)
    stop = asyncio.Event()
    remove_handlers = install_signal_handlers(stop)
    try:
        while not stop.is_set():
            now = clock()
            target = next_run(settings.briefing_time, now)
            wait_seconds = (target - now).total_seconds()
            print(f"  [cron] next briefing at {target.strftime('%I:%M %p')} ({int(wait_seconds)}s)")
            try:
                await asyncio.wait_for(stop.wait(), timeout=wait_seconds)
                break
            except asyncio.TimeoutError:
                pass

            code = await run_once(settings, stop=stop)
            if code:
                print(f"  [cron] briefing failed with exit code {code}, next attempt tomorrow")
    finally:
        remove_handlers()

    print("Shutdown signal received, daily loop stopped.")
    return 0


def main():
    settings = load_settings()
    try:
        return asyncio.run(run_daily(settings))
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
