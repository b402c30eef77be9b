import argparse
import os
import sys

from huffcodec.bitstream import read_container, read_legacy
from huffcodec.codec import decompress
from huffcodec.errors import HuffcodecError

def main(argv=None):
    ap = argparse.ArgumentParser(description="Decode a Huffman-encoded file")
    ap.add_argument("--input", required=True, help="path to .huf")
    ap.add_argument("--output", required=True, help="path to decoded output")
    ap.add_argument("--legacy", action="store_true", help="input uses the tree line + raw bits layout")
    args = ap.parse_args(argv)

    try:
        f = open(args.input, "rb")
    except OSError as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        return 2

    try:
        with f:
            tree_text, packed = read_legacy(f) if args.legacy else read_container(f)
        data = decompress(tree_text, packed)
    except HuffcodecError as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        return 1

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "wb") as f:
            f.write(data)
    except OSError as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        return 2
    print(f"[decode] wrote {args.output} ({len(data)}B)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
