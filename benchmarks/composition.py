from timeit import timeit
from typing import Any

from linkchain import ComposeStrategy
from linkchain._internal.composer import resolve_composer


def _link(call_next: Any) -> Any:  # noqa: ANN401
    def step(num: int) -> int:
        return call_next(num + 1)

    return step


def _terminal() -> Any:  # noqa: ANN401
    return lambda num: num


def composition_case(composer: Any, depth: int) -> None:  # noqa: ANN401
    chain: list[Any] = [_link] * depth
    chain.append(_terminal)
    assert composer(chain)(0) == depth


def composition_measure() -> dict[str, dict[str, float]]:
    results: dict[str, float] = {}
    common_globs = {"composition_case": composition_case}
    stmt = "composition_case(composer, depth)"
    for strategy in ComposeStrategy:
        for depth in (1, 10, 100):
            globs = common_globs | {
                "composer": resolve_composer(strategy),
                "depth": depth,
            }
            key = f"{strategy.value}_{depth}"
            results[key] = timeit(stmt, globals=globs, number=1000)
    results = dict(sorted(results.items(), key=lambda item: item[1]))
    return {"composition": results}
