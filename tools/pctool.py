#!/usr/bin/env python3
import argparse, os, sys
from pixelcanvas.canvasgen.generator import generate
from pixelcanvas.canvasgen.weights import merge_ratios
from pixelcanvas.render.svg import to_combined_svg
from pixelcanvas.render.symbols import to_symbol_matrix
from pixelcanvas.validate import validate_canvas

def parse_ratios(ap, items):
    # --ratio accent1=0 --ratio base=0.6
    if not items:
        return None
    out = {}
    for item in items:
        name, sep, value = item.partition('=')
        if not sep:
            ap.error(f"--ratio expects name=value, got {item!r}")
        try:
            out[name.strip()] = float(value)
        except ValueError:
            ap.error(f"--ratio {name}: not a number: {value!r}")
    try:
        merge_ratios(out)
    except ValueError as e:
        ap.error(str(e))
    return out

def write_text(text, path):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text + '\n')

def cmd_emit(ap, args):
    res = generate(args.seed, parse_ratios(ap, args.ratio))
    if args.format == 'svg':
        text = to_combined_svg(res.top_grid, res.main_grid, pixel_size=args.pixel, gap=args.gap)
    else:
        text = to_symbol_matrix(res.top_grid) + '\n\n' + to_symbol_matrix(res.main_grid)
    if args.out:
        write_text(text, args.out)
        print(f"Wrote {args.out}")
    else:
        print(text)

def cmd_golden(ap, args):
    res = generate(args.seed, parse_ratios(ap, args.ratio))
    os.makedirs(args.outdir, exist_ok=True)
    write_text(to_symbol_matrix(res.top_grid), os.path.join(args.outdir, f"{args.name}.top.txt"))
    write_text(to_symbol_matrix(res.main_grid), os.path.join(args.outdir, f"{args.name}.main.txt"))
    print(f"Wrote golden pair {args.name} (seed value {res.seed_value}) to {args.outdir}")

def cmd_check(ap, args):
    res = generate(args.seed, parse_ratios(ap, args.ratio))
    top_ok = validate_canvas(res.top_grid)
    main_ok = validate_canvas(res.main_grid)
    print(f"top: {'ok' if top_ok else 'VIOLATION'}  main: {'ok' if main_ok else 'VIOLATION'}")
    return 0 if (top_ok and main_ok) else 1

def main(argv=None):
    p = argparse.ArgumentParser(description="Seeded pixel canvas generator")
    sub = p.add_subparsers(dest='cmd', required=True)

    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=str, required=True)
    p1.add_argument('--ratio', action='append', metavar='NAME=VALUE')
    p1.add_argument('--format', choices=('symbols', 'svg'), default='symbols')
    p1.add_argument('--pixel', type=int, default=20, help="SVG pixel size")
    p1.add_argument('--gap', type=int, default=40, help="SVG gap between canvases")
    p1.add_argument('--out', type=str)
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('golden')
    p2.add_argument('--seed', type=str, required=True)
    p2.add_argument('--name', type=str, required=True)
    p2.add_argument('--outdir', type=str, default=os.path.join("data", "golden_canvases"))
    p2.add_argument('--ratio', action='append', metavar='NAME=VALUE')
    p2.set_defaults(func=cmd_golden)

    p3 = sub.add_parser('check')
    p3.add_argument('--seed', type=str, required=True)
    p3.add_argument('--ratio', action='append', metavar='NAME=VALUE')
    p3.set_defaults(func=cmd_check)

    args = p.parse_args(argv)
    return args.func(sub.choices[args.cmd], args) or 0

if __name__ == '__main__':
    sys.exit(main())
