#!/usr/bin/env python3
# print the xterm 256-color cube and grayscale ramp as a C header fragment.
#
# the output is included as xterm256Palette.h, whose union rgb_c entries are
# laid out {b, g, r}, so each entry is written blue first.
#
# reference:
# https://en.wikipedia.org/wiki/ANSI_escape_code
# https://github.com/ThomasDickey/xterm-snapshots/blob/master/256colres.pl

from collections import namedtuple

Color = namedtuple("Color", ["red", "green", "blue"])

# channel intensities of the 6x6x6 cube
CUBE_LEVELS = (0x00, 0x5f, 0x87, 0xaf, 0xd7, 0xff)
CUBE_SIZE = 6 * 6 * 6

# colors 16-255, the first 16 ANSI colors are not part of the table
PALETTE_SIZE = 0xff - 0x10 + 0x01


def generate_color_cube(count=CUBE_SIZE):
    """Return ``count`` cube colors, red varying slowest and blue fastest.

    Indices past the end of the cube wrap around to its start.
    """
    colors = []
    for code in range(count):
        r = CUBE_LEVELS[(code // 36) % 6]
        g = CUBE_LEVELS[(code // 6) % 6]
        b = CUBE_LEVELS[code % 6]
        colors.append(Color(r, g, b))
    return colors


def generate_grayscale_ramp():
    # leaves out black and white, both already in the cube
    colors = []
    for gray in range(1, 24):
        level = 8 + gray * 10
        colors.append(Color(level, level, level))
    return colors


def generate_palette():
    """Return the PALETTE_SIZE colors of the table, cube first.

    The cube runs one index past its end, so entry 216 is a wrapped black
    followed by the 23 grayscale steps.
    """
    grays = generate_grayscale_ramp()
    return generate_color_cube(PALETTE_SIZE - len(grays)) + grays


def format_color(color):
    return f"\t{{0x{color.blue:02X}, 0x{color.green:02X}, 0x{color.red:02X}}},"


def render(colors):
    lines = ["/* GENERATED HEADER FILE */"]
    lines.append("union rgb_c xterm256Palette[0xff - 0x10 + 0x01] = {")
    lines.extend(format_color(color) for color in colors)
    lines.append("};")
    return "\n".join(lines) + "\n"


def main():
    print(render(generate_palette()), end="")


if __name__ == "__main__":
    main()
