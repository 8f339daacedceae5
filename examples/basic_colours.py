"""Cycle through a few colour updates on a connected HUE+.

Usage:
    python examples/basic_colours.py /dev/ttyACM0
"""

import logging
import sys

from hueplus import Channel, Colour, HuePlus, Mode


def main(port: str) -> None:
    logging.basicConfig(level=logging.INFO)

    hue = HuePlus(port)
    hue.connect()
    try:
        hue.set_all(Colour(red=255, green=0, blue=0))
        hue.update(Channel.BOTH)

        hue.set_led(1, Colour(red=100, green=0, blue=255))
        hue.update(Channel.TWO)

        hue.set_all(Colour(red=255, green=255, blue=255))
        hue.update(Channel.ONE, Mode.BREATHING)

        hue.set_all(Colour(red=100, green=0, blue=150))
        hue.update(Channel.BOTH)
    finally:
        hue.disconnect()


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "/dev/ttyACM0")
