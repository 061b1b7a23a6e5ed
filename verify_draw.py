"""Verify a disclosed fair draw against its published HMAC."""

import argparse
import sys

from fairdice.fair_draw import compute_digest, verify_disclosure


def main(argv=None) -> int:
    """Recompute HMAC(key, value) and compare it with the published one."""
    parser = argparse.ArgumentParser(
        description="Check that a revealed key and number match a published HMAC"
    )
    parser.add_argument("--key", type=str, required=True, help="Revealed key (hex)")
    parser.add_argument("--value", type=int, required=True, help="Revealed number")
    parser.add_argument(
        "--hmac", type=str, required=True, help="HMAC published before your move"
    )
    args = parser.parse_args(argv)

    try:
        key = bytes.fromhex(args.key)
    except ValueError:
        print(f"Error: key is not valid hex: {args.key}", file=sys.stderr)
        return 1

    expected = compute_digest(key, args.value)
    print(f"Published HMAC:  {args.hmac.lower()}")
    print(f"Recomputed HMAC: {expected}")

    if verify_disclosure(args.hmac, key, args.value):
        print("OK: the number was fixed before your move")
        return 0

    print("MISMATCH: the disclosed number does not match the commitment")
    return 1


if __name__ == "__main__":
    sys.exit(main())
