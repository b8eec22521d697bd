#!/usr/bin/env python3
"""
memkv_menu - menú interactivo de texto sobre el store global de memkv.
Solo usa la biblioteca estándar de Python.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, TextIO

from memkv import ExpirationResult, Store, get_instance

MENU = (
    "1. Set key-value pair",
    "2. Get value by key",
    "3. Delete key-value pair",
    "4. Check if key exists",
    "5. List all keys",
    "6. Add an expiration time for key-value pairs that already exist",
    "7. Exit",
)

EXIT_CHOICE = 7

# Datos de ejemplo cargados al arrancar: (clave, valor, ttl)
SEED_DATA = (
    ("xiaoming", "175", 0),
    ("zhangsan", "156", 10),
    ("lisi", "180", 0),
    ("lwangwu", "188", 0),
)


class EndOfInput(Exception):
    """La entrada se cerró (EOF) en medio de un prompt."""


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        description="Menú interactivo sobre un store clave-valor en memoria con TTL."
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="No cargar las claves de ejemplo al arrancar",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log de depuración del store en stderr",
    )
    return parser.parse_args(argv)


def seed(store: Store) -> None:
    for key, value, ttl in SEED_DATA:
        store.set(key, value, ttl)


def prompt(text: str, stdin: TextIO, stdout: TextIO) -> str:
    """Muestra ``text`` y lee una línea; lanza EndOfInput en EOF."""
    stdout.write(text)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EndOfInput
    return line.strip()


def prompt_ttl(text: str, stdin: TextIO, stdout: TextIO) -> int | None:
    """Lee un TTL entero; None si la entrada no es un entero."""
    raw = prompt(text, stdin, stdout)
    try:
        return int(raw or "0")
    except ValueError:
        print(f"Invalid expiration: {raw!r} is not an integer.", file=stdout)
        return None


def do_set(store: Store, stdin: TextIO, stdout: TextIO) -> None:
    key = prompt("Enter your key: ", stdin, stdout)
    value = prompt("Enter your value: ", stdin, stdout)
    ttl = prompt_ttl("Enter expiration (0 for no expiration): ", stdin, stdout)
    if ttl is None:
        return
    try:
        store.set(key, value, ttl)
    except ValueError as exc:
        print(f"Error: {exc}", file=stdout)
        return
    print(f"Your key-value {{ {key} - {value} }} pair set.", file=stdout)


def do_get(store: Store, stdin: TextIO, stdout: TextIO) -> None:
    key = prompt("Enter key: ", stdin, stdout)
    value, found = store.get(key)
    if found:
        print(f"Value: {value}", file=stdout)
    else:
        print(f"Key {key} not found.", file=stdout)


def do_delete(store: Store, stdin: TextIO, stdout: TextIO) -> None:
    key = prompt("Enter key you want to delete: ", stdin, stdout)
    store.delete(key)
    print(f"Key {key} deleted.", file=stdout)


def do_exists(store: Store, stdin: TextIO, stdout: TextIO) -> None:
    key = prompt("Enter key to check: ", stdin, stdout)
    if store.exists(key):
        print(f"Key {key} exists.", file=stdout)
    else:
        print(f"Key {key} not found.", file=stdout)


def do_keys(store: Store, stdin: TextIO, stdout: TextIO) -> None:
    print("Keys: [" + " ".join(sorted(store.keys())) + "]", file=stdout)


def do_set_expiration(store: Store, stdin: TextIO, stdout: TextIO) -> None:
    key = prompt("Enter key to set expiration: ", stdin, stdout)
    ttl = prompt_ttl(
        "Enter expiration time in seconds (0 for no expiration): ", stdin, stdout
    )
    if ttl is None:
        return
    try:
        result = store.set_expiration(key, ttl)
    except ValueError as exc:
        print(f"Error: {exc}", file=stdout)
        return
    messages = {
        ExpirationResult.SET: f"Expiration time set for key '{key}': {ttl} seconds",
        ExpirationResult.NOT_FOUND: "Key not found.",
        ExpirationResult.NO_EXPIRATION: f"No expiration requested for key '{key}'.",
        ExpirationResult.ALREADY_SET: f"Key '{key}' already has an expiration time set.",
    }
    print(messages[result], file=stdout)


ACTIONS: dict[int, Callable[[Store, TextIO, TextIO], None]] = {
    1: do_set,
    2: do_get,
    3: do_delete,
    4: do_exists,
    5: do_keys,
    6: do_set_expiration,
}


def run_menu(store: Store, stdin: TextIO, stdout: TextIO) -> None:
    """Bucle del menú hasta elegir Exit o llegar a EOF."""
    while True:
        for line in MENU:
            print(line, file=stdout)
        try:
            raw = prompt("Enter your choice: ", stdin, stdout)
            try:
                choice = int(raw)
            except ValueError:
                choice = -1
            if choice == EXIT_CHOICE:
                break
            action = ACTIONS.get(choice)
            if action is None:
                print("Invalid choice. Please enter a valid option.", file=stdout)
                continue
            action(store, stdin, stdout)
        except EndOfInput:
            print(file=stdout)
            break
    print("Exiting.", file=stdout)


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = get_instance()
    if not args.no_seed:
        seed(store)

    run_menu(store, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
