# ----- main.py -----
import argparse
import sys
from tabulate import tabulate
import config
from sharerecon import ShareRecoveryError, create_commitment, load_share_file


# --- Helper Functions ---
def print_backend(message, verbose=True):
    if verbose:
        print(f"[sharerecon] {message}", file=sys.stderr)


def reconstruct_file(path, strict=None, cross_check=None, verbose=False):
    """Load one share document and return its secret"""
    share_set = load_share_file(path, strict=strict)
    print_backend(
        f"{path}: k={share_set.required_count}, n={share_set.total_count}, "
        f"{share_set.point_count} shares supplied",
        verbose
    )
    return share_set.reconstruct(cross_check=cross_check)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Reconstruct Shamir secrets from radix-encoded share documents."
    )
    parser.add_argument("files", nargs="+", help="Share documents (JSON), one secret each.")
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=config.Config.STRICT_DECODING,
        help="Fail on characters that are not digits of the share's base.",
    )
    parser.add_argument(
        "--cross-check",
        action=argparse.BooleanOptionalAction,
        default=config.Config.CROSS_CHECK_SHARES,
        help="Require shares beyond the first k to lie on the same polynomial.",
    )
    parser.add_argument("--table", action="store_true", help="Print results as a table.")
    parser.add_argument(
        "--fingerprint",
        action="store_true",
        help="Add a SHA-256 commitment of each secret.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    rows = []
    for number, path in enumerate(args.files, 1):
        try:
            secret = reconstruct_file(
                path,
                strict=args.strict,
                cross_check=args.cross_check,
                verbose=args.verbose
            )
        except ShareRecoveryError as e:
            print(f"Error: {e} in file {path}", file=sys.stderr)
            return 1

        commitment = create_commitment(secret) if args.fingerprint else None
        if args.table:
            rows.append([f"tc{number}", path, str(secret)] + ([commitment] if commitment else []))
        else:
            line = f"tc{number} secret (c) = {secret}"
            if commitment:
                line += f" sha256={commitment}"
            print(line)

    if args.table:
        headers = ["Case", "File", "Secret"] + (["SHA-256"] if args.fingerprint else [])
        print(tabulate(rows, headers=headers, disable_numparse=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
