import asyncio

import pytest

from models.paged import PagedResult
from services.inspiration_service import InspirationService
from ui import keyboards


@pytest.mark.parametrize(
    "page, has_prev, has_next",
    [(0, False, True), (1, True, True), (2, True, False), (3, True, False)],
)
def test_flags_for_twelve_items_five_per_page(page, has_prev, has_next):
    result = PagedResult(page=page, page_size=5, total_count=12)

    assert result.has_prev is has_prev
    assert result.has_next is has_next


def test_exact_multiple_has_no_next_page():
    assert PagedResult(page=1, page_size=5, total_count=10).has_next is False


def test_empty_result():
    result = PagedResult(page=0, page_size=5, total_count=0)
    assert (result.has_prev, result.has_next, result.items) == (False, False, [])


class _PageRepo:
    def __init__(self, total):
        self.total = total
        self.calls = []

    def get_page(self, telegram_id, skip, take):
        self.calls.append((telegram_id, skip, take))
        return [f"item-{i}" for i in range(skip, min(skip + take, self.total))], self.total


def test_service_translates_page_to_skip_take():
    repo = _PageRepo(total=12)
    service = InspirationService(repo=repo)

    result = asyncio.run(service.get_page(7, 2, 5))

    assert repo.calls == [(7, 10, 5)]
    assert result.items == ["item-10", "item-11"]
    assert (result.page, result.total_count, result.has_prev, result.has_next) == (2, 12, True, False)


@pytest.mark.parametrize("page, page_size", [(-1, 5), (0, 0), (0, -3)])
def test_service_rejects_bad_cursor(page, page_size):
    service = InspirationService(repo=_PageRepo(total=0))

    with pytest.raises(ValueError):
        asyncio.run(service.get_page(7, page, page_size))


def test_pagination_keyboard():
    assert keyboards.pagination(0, False, False) is None

    markup = keyboards.pagination(1, True, True)
    data = [button.callback_data for button in markup.inline_keyboard[0]]
    assert data == ["insp_list:0", "insp_list:2"]
