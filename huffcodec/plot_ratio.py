import argparse
import os

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from huffcodec.codec import compress
from huffcodec.metrics import entropy

WORDS = b"the of and to in is that it was for on are with as his they be at one have this from".split()

def gen_uniform(rng, n):
    return rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

def gen_skewed(rng, n):
    # geometric-ish distribution over 32 symbols
    p = 0.5 ** np.arange(1, 33)
    p /= p.sum()
    return rng.choice(32, size=n, p=p).astype(np.uint8).tobytes()

def gen_text(rng, n):
    out = bytearray()
    while len(out) < n:
        out += WORDS[rng.integers(len(WORDS))]
        out += b"\n" if rng.random() < 0.1 else b" "
    return bytes(out[:n])

def gen_single(rng, n):
    return b"A" * n

GENERATORS = {
    "uniform": gen_uniform,
    "skewed": gen_skewed,
    "text": gen_text,
    "single": gen_single,
}

def bits_per_symbol(data: bytes) -> float:
    tree_text, packed = compress(data)
    return 8.0 * (len(tree_text) + len(packed)) / len(data)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--outdir", default="results", help="directory for the PNG")
    ap.add_argument("--sizes", default="256,1024,4096,16384,65536", help="comma-separated input sizes in bytes")
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args(argv)

    sizes = [int(s) for s in args.sizes.split(",")]
    rng = np.random.default_rng(args.seed)

    plt.figure(figsize=(7, 4))
    for name, gen in GENERATORS.items():
        bps, ent = [], []
        for n in sizes:
            data = gen(rng, n)
            bps.append(bits_per_symbol(data))
            ent.append(entropy(data))
        line, = plt.plot(sizes, bps, marker="o", label=f"{name} (coded)")
        plt.plot(sizes, ent, linestyle="--", color=line.get_color(), label=f"{name} (entropy)")
        print(f"[plot] {name}: " + ", ".join(f"{n}B={b:.3f}" for n, b in zip(sizes, bps)))

    plt.xscale("log")
    plt.xlabel("input size (bytes)")
    plt.ylabel("bits / symbol (incl. tree)")
    plt.title("Huffman coded size vs entropy bound", fontsize=9)
    plt.legend(fontsize=7)
    plt.tight_layout()

    os.makedirs(args.outdir, exist_ok=True)
    out = os.path.join(args.outdir, "fig_ratio.png")
    plt.savefig(out, dpi=150)
    plt.close()
    print(f"[plot] wrote {out}")

if __name__ == "__main__":
    main()
