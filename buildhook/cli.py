"""Command-line helpers for decoding, encoding, and signing event payloads."""

from __future__ import annotations

import argparse
import sys
import typing as typ
from pathlib import Path

import msgspec

from buildhook.api.signature import SIGNATURE_HEADER, compute_signature
from buildhook.events import Event, InvalidEventFormatError, decode_event, encode_event


def _read_bytes(source: str) -> bytes:
    """Return the contents of ``source``, reading stdin for ``-``."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _decode(args: argparse.Namespace) -> int:
    try:
        event = decode_event(_read_bytes(args.payload))
    except InvalidEventFormatError as exc:
        print(f"{args.payload}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(msgspec.json.encode(event).decode("utf-8") + "\n")
    return 0


def _encode(args: argparse.Namespace) -> int:
    try:
        event = msgspec.json.decode(_read_bytes(args.event), type=Event)
    except msgspec.DecodeError as exc:
        print(f"{args.event}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(encode_event(event))
    return 0


def _sign(args: argparse.Namespace) -> int:
    signature = compute_signature(args.secret, _read_bytes(args.payload))
    print(f"{SIGNATURE_HEADER}: {signature}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``buildhook-event``."""
    parser = argparse.ArgumentParser(prog="buildhook-event", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    decode = commands.add_parser("decode", help="Decode a wire payload to JSON")
    decode.add_argument("payload", help="Payload file, or - for stdin")
    decode.set_defaults(handler=_decode)

    encode = commands.add_parser("encode", help="Encode a JSON event to wire text")
    encode.add_argument("event", help="JSON event file, or - for stdin")
    encode.set_defaults(handler=_encode)

    sign = commands.add_parser("sign", help="Print the signature header for a payload")
    sign.add_argument("payload", help="Payload file, or - for stdin")
    sign.add_argument("--secret", required=True, help="Shared webhook secret")
    sign.set_defaults(handler=_sign)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run ``buildhook-event``.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when the input is invalid.

    """
    args = build_parser().parse_args(argv)
    handler: typ.Callable[[argparse.Namespace], int] = args.handler
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
