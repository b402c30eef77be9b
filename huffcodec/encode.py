import argparse
import os
import sys

from huffcodec.bitstream import write_container, write_legacy
from huffcodec.codec import compress
from huffcodec.freq import analyze, relative_frequencies
from huffcodec.huffman import build_codebook, build_tree
from huffcodec.metrics import compression_ratio, entropy, mean_code_length

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-encode a file")
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .huf")
    ap.add_argument("--legacy", action="store_true", help="write tree line + raw bits instead of the framed container")
    args = ap.parse_args(argv)

    try:
        with open(args.input, "rb") as f:
            data = f.read()
    except OSError as e:
        print(f"[encode] error: {e}", file=sys.stderr)
        return 2

    tree_text, packed = compress(data)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "wb") as f:
            if args.legacy:
                write_legacy(f, tree_text, packed)
            else:
                write_container(f, tree_text, packed)
    except OSError as e:
        print(f"[encode] error: {e}", file=sys.stderr)
        return 2
    out_len = os.path.getsize(args.output)

    print(f"[encode] wrote {args.output}")
    print(f"[encode] input={len(data)}B tree={len(tree_text)}B payload={len(packed)}B total={out_len}B")
    if data:
        table = analyze(data)
        code = build_codebook(build_tree(relative_frequencies(table)))
        print(f"[encode] symbols={len(code)} entropy={entropy(data):.4f} "
              f"mean_len={mean_code_length(table, code):.4f} bits/sym "
              f"ratio={compression_ratio(len(data), out_len):.3f}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
