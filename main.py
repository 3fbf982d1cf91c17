# main.py
import argparse
import logging
import sys

from fmindex.adapters import bwt_matrix, format_bwt_matrix
from fmindex.bwt import bwt_transform, inverse_bwt
from fmindex.config import DEFAULT_SUFFIX_ARRAY_METHOD, LOG_FORMAT, SENTINEL_GLYPH, SUFFIX_ARRAY_METHODS
from fmindex.exceptions import FMIndexError
from fmindex.fm_index import build_fm_index, extract
from fmindex.suffix_array import bwt_suffix_array
from fmindex.symbols import glyph

def render(items):
    return ''.join(glyph(item, SENTINEL_GLYPH) for item in items)

def show_index(text, method):
    suffix_array = bwt_suffix_array(text, method=method)
    print(f"Suffix array: {suffix_array}")

    bwt = bwt_transform(text, suffix_array)
    print(f"BWT: {render(bwt)}")

    fm_index = build_fm_index(bwt)
    print("C table:")
    for count, symbol in fm_index.c_table:
        print(f"  {render([symbol])}: {count}")
    print("Occ table:")
    for symbol, entries in fm_index.occ_table:
        cells = ' '.join(f"({k},{occ})" for k, occ, _ in entries)
        print(f"  {render([symbol])}: {cells}")
    print(f"Extracted first group: {render(extract(fm_index))}")

    recovered = ''.join(inverse_bwt(bwt))
    print(f"Inverse BWT: {recovered}")
    return recovered == text

def main(argv=None):
    parser = argparse.ArgumentParser(description="Build the BWT and FM-index tables of a string.")
    parser.add_argument("text", help="input text")
    parser.add_argument("--method", choices=SUFFIX_ARRAY_METHODS, default=DEFAULT_SUFFIX_ARRAY_METHOD,
                        help="suffix array construction (default: %(default)s)")
    parser.add_argument("--matrix", action="store_true", help="print the sorted rotation matrix")
    parser.add_argument("--benchmark", action="store_true", help="run the construction benchmark on the text")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    try:
        if args.matrix:
            print(format_bwt_matrix(bwt_matrix(args.text, method=args.method)))
        ok = show_index(args.text, args.method)
    except FMIndexError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.benchmark:
        from tests.benchmark import print_benchmark_summary, run_full_benchmark
        results = run_full_benchmark(args.text.encode("utf-8"), method=args.method)
        print_benchmark_summary(results)

    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
