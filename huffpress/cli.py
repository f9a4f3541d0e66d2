"""Interactive menu for converting, compressing and decompressing a file."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional, TextIO

from huffpress.bits import write_to_binary_file
from huffpress.huffman import compress_file, decompress_file

BINARY_FILE = "output.bin"
COMPRESSED_FILE = "compressed_output.bin"
DECOMPRESSED_FILE = "decompressed_output.txt"

_MENU = "1. Convert to Binary\n2. Compress File\n3. Decompress File\n4. Exit\n"


class MenuChoice(IntEnum):
    CONVERT = 1
    COMPRESS = 2
    DECOMPRESS = 3
    EXIT = 4


def validate_input_file(filename: str) -> Path:
    """Return the path of an existing regular file, or raise FileNotFoundError."""
    path = Path(filename)
    if not path.is_file():
        raise FileNotFoundError(
            f"File '{filename}' not found in the current directory."
        )
    return path


def _clear(output: TextIO) -> None:
    if output.isatty():
        output.write("\033[H\033[2J")


def _parse_choice(text: str) -> Optional[MenuChoice]:
    try:
        return MenuChoice(int(text.strip()))
    except ValueError:
        return None


def run_menu(filename: str, input_func: Callable[[], str], output: TextIO) -> int:
    """Run the menu until the user exits; return a process exit status."""

    def ask(prompt: str) -> str:
        output.write(prompt)
        output.flush()
        return input_func()

    while True:
        output.write(_MENU)
        try:
            choice = _parse_choice(ask("Please select an option to proceed further: "))
        except EOFError:
            return 0

        try:
            if choice is MenuChoice.CONVERT:
                output.write("Converting to binary...\n")
                in_size, out_size = write_to_binary_file(filename, BINARY_FILE)
                output.write(
                    f"  Successfully wrote content of '{filename}' to binary file "
                    f"'{BINARY_FILE}' as actual bits.\n"
                    f" Input File: {in_size} bytes ({in_size * 8} bits)\n"
                    f" Output File: {out_size} bytes ({out_size * 8} bits)\n\n\n\n"
                )
                try:
                    ask("Press Enter to return to the menu...\n")
                except EOFError:
                    return 0
                _clear(output)
            elif choice is MenuChoice.COMPRESS:
                output.write("Compressing file...\n")
                compress_file(BINARY_FILE, COMPRESSED_FILE)
                output.write(
                    "Compression complete.\n"
                    f"File compressed successfully to '{COMPRESSED_FILE}'.\n"
                )
            elif choice is MenuChoice.DECOMPRESS:
                output.write("Decompressing file...\n")
                decompress_file(COMPRESSED_FILE, DECOMPRESSED_FILE)
                output.write(
                    "Decompression complete. Output written to "
                    f"'{DECOMPRESSED_FILE}'\n"
                    f"You can now view the decompressed file '{DECOMPRESSED_FILE}'.\n"
                )
            elif choice is MenuChoice.EXIT:
                output.write("Exiting...\n")
                return 0
            else:
                _clear(output)
                output.write("Invalid choice. Please try again.\n")
        except (OSError, ValueError) as exc:
            output.write(f"Error: {exc}\n")
            return 1


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="huffpress", description="Huffman file compressor"
    )
    parser.add_argument("filename", nargs="?", help="file to work on")
    args = parser.parse_args(argv)

    print("\t\t\tHuffman File Compressor")
    print("Welcome to the Huffman File Compressor!")
    filename = args.filename
    try:
        if filename is None:
            print(
                "To proceed further, please enter the name of the file you want "
                "to compress and ensure that it is in the current directory."
            )
            filename = input("Enter the name of the input file (e.g., input.txt): ").strip()
        validate_input_file(filename)
        print("The file is validated now, you can proceed for further operations.")
        input("Press Enter to continue...\n")
    except FileNotFoundError as exc:
        print(f"E R R O R : {exc}")
        return 1
    except EOFError:
        return 0
    _clear(sys.stdout)
    return run_menu(filename, input, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())