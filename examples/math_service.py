"""Demonstration service showing class-level and method-level configuration."""

from __future__ import annotations

from loggable import LogLevel, configure, loggable


@loggable
class MathService:
    """Every public method is logged with the default descriptor."""

    def add(self, a: int, b: int) -> int:
        return a + b

    @loggable(log_only_exceptions=True, log_arguments_and_results=False)
    def add_upto_100(self, a: int, b: int) -> int:
        if a + b > 100:
            raise ValueError("Error message")
        return a + b

    @loggable(log_level=LogLevel.DEBUG)
    def multiply(self, a: int, b: int) -> int:
        return a * b


def main() -> None:
    configure(sink="console")
    service = MathService()
    print(service.add(10, 12))
    print(service.add_upto_100(10, 12))
    print(service.multiply(6, 7))
    try:
        service.add_upto_100(100, 12)
    except ValueError as exc:
        print(f"caught: {exc}")


if __name__ == "__main__":
    main()
