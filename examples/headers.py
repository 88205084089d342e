from __future__ import annotations

from assoc import AssocSequence, delete, get, merge, put, uniq
from assoc.wire import FlatListSchema, decode, encode

# Header names compare case-insensitively.
HEADERS_TEST = "equalp"

DEFAULTS = AssocSequence.of([
    ("Accept", "*/*"),
    ("User-Agent", "assoc/0.1"),
    ("Connection", "keep-alive"),
])


def build_request_headers(overrides: list[tuple[str, str]]) -> AssocSequence:
    headers = merge(DEFAULTS, overrides, test=HEADERS_TEST)
    headers = put(headers, "Host", "example.org", replace=True, test=HEADERS_TEST)
    return delete(headers, "connection", test=HEADERS_TEST)


def main() -> None:
    headers = build_request_headers([("accept", "application/json"), ("X-Trace", "1")])
    print("Accept:", get(headers, "ACCEPT", test=HEADERS_TEST))
    print("Headers:", encode(headers))

    wire = '["Set-Cookie", "a=1", "set-cookie", "b=2", "Vary", "Accept"]'
    received = decode(wire, FlatListSchema())
    print("Cookies kept as multi-valued:", [v for k, v in received if k.lower() == "set-cookie"])
    print("Visible:", encode(uniq(received, test=HEADERS_TEST), "object"))


if __name__ == "__main__":
    main()
