"""Main menu of the number system learning program."""

from __future__ import annotations

import argparse

from numsys.bitbyte import run_bit_byte_module
from numsys.quiz import run_quiz_module
from numsys.twos import run_twos_complement_module
from numsys.visualizer import run_visualizer_module

_MENU = (
    "\nMain Menu:\n"
    "1. Number Conversion Quiz Game\n"
    "2. Two's Complement Arithmetic Simulator\n"
    "3. Number Conversion Visualizer\n"
    "4. Bit/Byte Conversion & Bitwise Operations\n"
    "5. Exit"
)


def show_banner() -> str:
    """The title banner shown above the main menu."""
    return (
        "=======================================\n"
        "     Number System Learning Project    \n"
        "======================================="
    )


def _parse_int(reply: str) -> int | None:
    parts = reply.split()
    try:
        return int(parts[0]) if parts else None
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive main menu until the user exits."""
    parser = argparse.ArgumentParser(
        prog="numsys",
        description="Interactive exercises on number systems and binary arithmetic.",
    )
    parser.parse_args(argv)
    try:
        while True:
            print(show_banner())
            print(_MENU)
            choice = _parse_int(input("\nEnter your choice: "))
            if choice == 1:
                run_quiz_module(input, print)
            elif choice == 2:
                run_twos_complement_module(input, print)
            elif choice == 3:
                run_visualizer_module(input, print)
            elif choice == 4:
                run_bit_byte_module(input, print)
            elif choice == 5:
                print("Exiting program. Goodbye!")
                return 0
            else:
                print("Invalid choice. Try again.")
            print("\nPress Enter to continue...")
            input()
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())