from __future__ import annotations

from typing import assert_never

from _infra import banner

from kungfu import Error, Ok, Result

from multiple_errors import collect_partitioned, fail_all_list, lift as L


def port(raw: str) -> Result[int, str]:
    return L.catching(lambda: int(raw), on_error=lambda e: f"{raw!r}: not a port")


def describe(r: Result[int, str]) -> str:
    # Positional errors: "ok" marks the entries that were fine.
    match r:
        case Ok(_):
            return "ok"
        case Error(message):
            return message
        case _ as unreachable:
            assert_never(unreachable)


def main() -> None:
    banner("01_quickstart: collect_partitioned + fail_all_list")

    raw_ports = ["8080", "http", "443", "ssh"]

    match collect_partitioned(port(raw) for raw in raw_ports):
        case Ok(ports):
            print(f"ports: {ports}")
        case Error(errors):
            print(f"{len(errors)} bad port(s): {errors}")

    match fail_all_list([port(raw) for raw in raw_ports], describe):
        case Ok(ports):
            print(f"ports: {ports}")
        case Error(per_position):
            for raw, status in zip(raw_ports, per_position):
                print(f"  {raw:>6} -> {status}")


if __name__ == "__main__":
    main()
