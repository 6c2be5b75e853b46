"""Stopwatch and timer basics on a simulated clock.

Demonstrates:
- Injecting a ManualClock so the demo runs instantly
- Running a stopwatch across a pause and splitting laps
- Counting a timer down past zero
- Receiving each session's record through an on_stop hook

Run: python -m examples.basics
"""

from datetime import timedelta

from lapwatch import ManualClock, Stopwatch, StopwatchRecord, Timer, TimerRecord


def fmt(d: timedelta) -> str:
    sign = "-" if d < timedelta(0) else ""
    total = abs(d).total_seconds()
    return f"{sign}{int(total // 60):02d}:{total % 60:05.2f}"


def report_laps(record: StopwatchRecord) -> None:
    for i, lap in enumerate(record.laps, 1):
        print(f"  lap {i}: {fmt(lap)}")
    print(f"  total: {fmt(record.total_elapsed)}")


def report_timer(record: TimerRecord) -> None:
    status = "overdue" if record.overdue else "left"
    print(f"  {fmt(record.remaining)} {status} of {fmt(record.total_configured)}")


def main() -> None:
    clock = ManualClock()

    print("=== Stopwatch ===\n")
    sw = Stopwatch(clock=clock)
    sw.on_stop(report_laps)

    sw.resume()
    clock.advance(12.5)
    sw.lap()
    clock.advance(4)
    sw.pause()  # pauses never count toward a lap
    clock.advance(30)
    sw.resume()
    clock.advance(6)
    sw.stop()

    print("\n=== Timer ===\n")
    timer = Timer(timedelta(seconds=20), clock=clock)
    timer.on_stop(report_timer)

    timer.resume()
    clock.advance(15)
    print(f"  reading: {fmt(timer.read())}")
    clock.advance(8)
    print(f"  reading: {fmt(timer.read())}  expired={timer.expired}")
    timer.stop()


if __name__ == "__main__":
    main()
