"""
Basic usage demonstration for steamacf.
"""

import io

import steamacf
from steamacf import Navigator, Token, WriterConfig

MANIFEST = b"""
"AppState"
{
    "appid"         "620"
    "name"          "Portal 2"
    "InstalledDepots"
    {
        "621" { "manifest" "2139451429718403612" "size" "11960282540" }
        "622" { "manifest" "4412390151386014640" "size" "1103812800" }
    }
    "UserConfig"
    {
        "language"  "english"
    }
}
"""


def main():
    print("steamacf - Basic Demo")
    print("=" * 40)

    print("\n1. Tokens")
    for token in steamacf.tokenize(b'"k" { "a" "b" }'):
        print(f"  {token!r}")

    print("\n2. Jump to a nested field")
    nav = Navigator(io.BytesIO(MANIFEST))
    nav.select_path(["AppState", "UserConfig", "language"])
    print(f"  language = {nav.read_string()}")

    print("\n3. Walk one dictionary")
    nav = Navigator(io.BytesIO(MANIFEST))
    nav.select_path(["AppState", "InstalledDepots"])
    nav.expect(Token.dict_start())
    while True:
        token = nav.expect_next()
        if token == Token.dict_end():
            break
        nav.expect(Token.dict_start())
        nav.select("size")
        print(f"  depot {token.value}: {int(nav.read_string()):,} bytes")
        nav.close_dict()

    print("\n4. JSON output")
    print(steamacf.to_json(steamacf.tokenize(MANIFEST), WriterConfig.pretty(2)))

    print("\n5. Errors")
    try:
        steamacf.to_json(steamacf.tokenize(b'{"a":}'))
    except steamacf.StreamError as e:
        print(f"  {e.kind}: {e}")
    try:
        Navigator(io.BytesIO(MANIFEST)).select_path(["AppState", "Missing"])
    except steamacf.PathNotFound as e:
        print(f"  {e.kind}: {e}")


if __name__ == "__main__":
    main()
