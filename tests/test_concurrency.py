"""Concurrent callers must not break the subdomain uniqueness invariant."""

import threading

from app.application.use_cases import (
    create_website,
    get_website_stats,
    search_websites,
    toggle_website_status,
)
from app.domain.errors import InvalidSubdomainError, SubdomainErrorReason


def _run_in_threads(target, count: int) -> None:
    barrier = threading.Barrier(count)

    def runner(index: int) -> None:
        barrier.wait()
        target(index)

    threads = [threading.Thread(target=runner, args=(index,)) for index in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_only_one_of_many_concurrent_creations_wins(any_store):
    outcomes: list[object] = []
    lock = threading.Lock()

    def attempt(index: int) -> None:
        try:
            website = create_website(
                any_store,
                name=f"Racer {index}",
                subdomain="Race" if index % 2 else "race",
                template_id="blog",
                owner="admin",
            )
            result: object = website
        except InvalidSubdomainError as exc:
            result = exc.reason
        with lock:
            outcomes.append(result)

    _run_in_threads(attempt, 8)

    winners = [outcome for outcome in outcomes if not isinstance(outcome, SubdomainErrorReason)]
    losers = [outcome for outcome in outcomes if isinstance(outcome, SubdomainErrorReason)]
    assert len(winners) == 1
    assert losers == [SubdomainErrorReason.ALREADY_TAKEN] * 7
    assert [website.subdomain for website in search_websites(any_store)] == ["race"]


def test_concurrent_toggles_keep_counts_consistent(store):
    websites = [
        create_website(store, name=f"Site {i}", subdomain=f"site{i}", template_id="blog", owner="x")
        for i in range(4)
    ]

    def toggle(index: int) -> None:
        for _ in range(25):
            toggle_website_status(store, websites[index % 4].id)
            stats = get_website_stats(store)
            assert stats.active_count + stats.building_count + stats.suspended_count == 4

    _run_in_threads(toggle, 8)

    assert get_website_stats(store).total == 4
