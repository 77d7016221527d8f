#!/usr/bin/env python3
# Render generated boards to PNGs using Pillow.
# Region colors are hue-spaced; --reveal dots the solution cells.

import argparse, os
from garden.config import preset
from garden.levelgen.generator import generate
from garden.render.board_image import render_board, save_board

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="First seed to render")
    ap.add_argument("-n", type=int, default=1, help="How many consecutive seeds")
    ap.add_argument("--mode", type=str, default="garden", help="Preset name")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--cell", type=int, default=48, help="Cell size in pixels")
    ap.add_argument("--reveal", action="store_true", help="Draw the solution markers")
    args = ap.parse_args()

    p = preset(args.mode)
    for seed in range(args.seed, args.seed + args.n):
        puz = generate(seed, p.size, p.count, rules=p.rules)
        img = render_board(puz.regions, puz.size, marks=puz.solution if args.reveal else None, cell=args.cell)
        save_board(img, os.path.join(args.outdir, p.name, f"{seed}.png"))
    print(f"Wrote PNGs to {os.path.join(args.outdir, p.name)}")

if __name__ == "__main__":
    main()
