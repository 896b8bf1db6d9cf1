import asyncio
import signal
import sys

from morning.config import load_settings
from morning.integrations.ollama_serve import ServeProcess
from morning.scheduler.briefing import send_morning_briefing


def install_signal_handlers(stop):
    """Set `stop` on SIGINT/SIGTERM. Returns a callable that removes the handlers."""
    loop = asyncio.get_running_loop()
    signals = [signal.SIGINT, signal.SIGTERM]
    try:
        for sig in signals:
            loop.add_signal_handler(sig, stop.set)
    except NotImplementedError:
        # Windows event loops have no add_signal_handler
        previous = {
            sig: signal.signal(sig, lambda *_: loop.call_soon_threadsafe(stop.set))
            for sig in signals
        }

        def restore():
            for sig, handler in previous.items():
                signal.signal(sig, handler)

        return restore

    def remove():
        for sig in signals:
            loop.remove_signal_handler(sig)

    return remove


async def supervise(settings, pipeline=send_morning_briefing, start_serve=ServeProcess.start, stop=None):
    """Start the model server, run the pipeline, tear the server down once.

    Whichever comes first, pipeline completion or an interrupt, triggers the
    teardown. On interrupt the pipeline task is left as is. Returns the exit code.
    """
    command = " ".join(settings.serve_command)
    try:
        serve = await start_serve(settings.serve_command)
    except OSError as e:
        print(f"ERROR: Failed to start `{command}`: {e}")
        return 1

    remove_handlers = None
    if stop is None:
        stop = asyncio.Event()
        remove_handlers = install_signal_handlers(stop)

    run_task = asyncio.ensure_future(pipeline(settings))
    stop_task = asyncio.ensure_future(stop.wait())
    try:
        done, _ = await asyncio.wait({run_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        if remove_handlers is not None:
            remove_handlers()

    if run_task not in done:
        print(f"Shutdown signal received, terminating `{command}`...")
        await serve.terminate()
        return 0

    stop_task.cancel()
    print(f"Application terminated, terminating `{command}`...")
    await serve.terminate()

    error = run_task.exception()
    if error is not None:
        print(f"ERROR: Good morning run failed: {error}")
        return 1
    return 0


def main():
    settings = load_settings()
    print("Starting good morning run...")
    print(f"Model: {settings.ollama_model}")
    print(f"Channel: {settings.channel_id or '(unset)'}")
    print(f"Recipients: {', '.join(name for name, _ in settings.recipients) or '(none)'}")
    return asyncio.run(supervise(settings))


if __name__ == "__main__":
    sys.exit(main())
