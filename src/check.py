import sys
import json
import argparse

import mod
from log import configure, logger


def _lines(a, stdin):
    if a.text:
        return a.text
    return [ln.rstrip("\n") for ln in stdin]


def main(argv=None, stdin=None, out=None):
    """
    Check texts from the command line or stdin

    :return: 1 if any text was rejected, else 0
    """
    ap = argparse.ArgumentParser(prog="moderate-check")
    ap.add_argument(
        "--context",
        choices=[c.value for c in mod.Context],
        default=mod.Context.COMMENT.value,
    )
    ap.add_argument("--json", action="store_true", help="one JSON object per line")
    ap.add_argument("--debug", action="store_true")
    ap.add_argument("text", nargs="*")
    a = ap.parse_args(argv)

    configure(debug=a.debug)
    out = out or sys.stdout
    blocked = 0

    for t in _lines(a, stdin or sys.stdin):
        v = mod.evaluate(t, a.context)
        if not v.allowed:
            blocked += 1
            logger.debug(f"flagged={v.flagged_word or '-'} text={t!r}")
        if a.json:
            d = v.to_dict()
            d["text"] = t
            d["flagged"] = v.flagged_word
            out.write(json.dumps(d, ensure_ascii=False) + "\n")
        else:
            out.write("ok\n" if v.allowed else f"blocked: {v.reason}\n")

    return 1 if blocked else 0


if __name__ == "__main__":
    sys.exit(main())
