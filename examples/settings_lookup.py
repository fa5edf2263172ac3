from __future__ import annotations

import logging

from perhaps import First, Just, Maybe, Nothing, UnrecoverablePreconditionViolation
from perhaps.combinators import first_present, lift2
from perhaps.unsafe import force_unwrap

logging.basicConfig(level=logging.DEBUG)


def lookup(settings: dict[str, str], key: str) -> Maybe[str]:
    return Maybe.from_optional(settings.get(key))


def parse_port(raw: str) -> Maybe[int]:
    if not raw.isdigit():
        return Nothing()
    return Just(int(raw)).filter(lambda port: 0 < port < 65536)


def resolve_endpoint(cli: dict[str, str], env: dict[str, str], file: dict[str, str]) -> Maybe[str]:
    host = first_present(lookup(cli, "host"), lookup(env, "HOST"), lookup(file, "host"))
    port = (
        lookup(cli, "port").bind(parse_port)
        | lookup(env, "PORT").bind(parse_port)
        | Just(8080)
    )
    return lift2(lambda h, p: f"{h}:{p}", host, port)


def main() -> None:
    cli = {"port": "not-a-port"}
    env = {"HOST": "example.internal", "PORT": "9000"}
    file = {"host": "localhost"}

    endpoint = resolve_endpoint(cli, env, file)
    print(endpoint)
    print(endpoint.unwrap_or("<unconfigured>"))

    profiles = [Nothing(), Just("staging"), Just("prod")]
    print(First.concat(First(p) for p in profiles).maybe)

    # No host anywhere.
    try:
        print(force_unwrap(resolve_endpoint({}, {}, {})))
    except UnrecoverablePreconditionViolation as e:
        print(f"Unconfigured endpoint: {e}")


if __name__ == "__main__":
    main()
