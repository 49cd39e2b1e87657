#!/usr/bin/env python3
"""
Example script writing a few lines through two daylog loggers.

Lines land in ./logs/<YYYY>_<MON>/<day>_robot and ./logs/<YYYY>_<MON>/<day>.
Set DAYLOG_ROOT to write somewhere else.

Usage:
    python examples/robot_logging_example.py
"""
import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from daylog import LogStreamCache, create_logger


async def main():
    """Log from a tagged robot logger and an untagged default logger."""
    cache = LogStreamCache()
    robot = await create_logger("robot", "robot", cache=cache)
    general = await create_logger(cache=cache)

    await robot("Cycle started, workers:", 4)
    await robot.tagged(["Processed ", " of ", " items"], 17, 20)
    await general("Robot cycle finished")

    error = await robot.write("Cycle finished")
    if error is not None:
        print(f"Last line was dropped: {error}")

    cache.close()


if __name__ == "__main__":
    asyncio.run(main())
