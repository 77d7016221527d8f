#!/usr/bin/env python3
import argparse, logging, os, sys
from garden.boardio import mask_rows, read_marks, write_tsv
from garden.config import preset
from garden.engine.validator import check_puzzle
from garden.levelgen.generator import generate
from garden.ui.feedback import message_for

def build_puzzle(args):
    if args.mode:
        p = preset(args.mode)
        return generate(args.seed, p.size, p.count, rules=p.rules)
    return generate(args.seed, args.size, args.count)

def cmd_emit(args):
    puz = build_puzzle(args)
    write_tsv(puz.region_rows(), args.out)
    print(f"Wrote {args.out} (seed {puz.seed_used})")
    if args.solution:
        write_tsv(mask_rows(puz.solution, puz.size), args.solution)
        print(f"Wrote {args.solution}")

def cmd_check(args):
    puz = build_puzzle(args)
    try:
        marks = read_marks(args.marks)
        outcome = check_puzzle(puz, marks)
    except ValueError as e:
        print(f"{args.marks}: {e}")
        return 2
    print(message_for(outcome, puz.count))
    if not outcome.ok:
        print(f"cells: {', '.join(str(i) for i in outcome.cells)}")
    return 0 if outcome.ok else 1

def cmd_golden(args):
    p = preset(args.mode)
    base = os.path.join(args.outdir, p.name)
    os.makedirs(base, exist_ok=True)
    for seed in range(args.first, args.first + args.n):
        puz = generate(seed, p.size, p.count, rules=p.rules)
        write_tsv(puz.region_rows(), os.path.join(base, f"{seed}.regions.tsv"))
        write_tsv(mask_rows(puz.solution, puz.size), os.path.join(base, f"{seed}.solution.tsv"))
    print(f"Wrote golden pack to {base}")

def add_board_args(p):
    p.add_argument('--seed', type=int, required=True)
    p.add_argument('--mode', type=str, help='Preset name (garden, meadow, overgrown, warren)')
    p.add_argument('--size', type=int, default=6)
    p.add_argument('--count', type=int, default=6)

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    add_board_args(p1)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--solution', type=str)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('check')
    add_board_args(p2)
    p2.add_argument('--marks', type=str, required=True, help='0/1 TSV of marked cells')
    p2.set_defaults(func=cmd_check)
    p3 = sub.add_parser('golden')
    p3.add_argument('--mode', type=str, default='garden')
    p3.add_argument('--first', type=int, default=1)
    p3.add_argument('-n', type=int, default=25)
    p3.add_argument('--outdir', type=str, required=True)
    p3.set_defaults(func=cmd_golden)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    return args.func(args) or 0

if __name__ == '__main__':
    sys.exit(main())
