"""Tests for catalog/domain/repositories/products.py."""

import pytest

from catalog.domain.exceptions import DuplicateKeyError, StoreError, ValidationError
from catalog.domain.models import ProductDraft, TextSearch


def _draft(name, **overrides):
    defaults = dict(
        name=name,
        description=f"{name} description",
        price=10.0,
        image="https://cdn.example.com/item.png",
    )
    defaults.update(overrides)
    return ProductDraft(**defaults)


async def _seed(repo, n):
    return [await repo.create(_draft(f"Item {i:02d}")) for i in range(n)]


# --- create / slug ---

async def test_create_derives_slug(product_repo):
    product = await product_repo.create(_draft("Hello, World! 2024"))
    assert product.slug == "hello-world-2024"


async def test_create_rejects_second_product_with_same_slug(product_repo):
    await product_repo.create(_draft("Hello World"))
    with pytest.raises(DuplicateKeyError):
        await product_repo.create(_draft("hello world!"))


async def test_duplicate_slug_is_a_store_error(product_repo):
    await product_repo.create(_draft("Hello World"))
    with pytest.raises(StoreError):
        await product_repo.create(_draft("Other", slug="hello-world"))


async def test_slug_uniqueness_includes_soft_deleted_products(product_repo):
    first = await product_repo.create(_draft("Hello World"))
    await product_repo.soft_delete(first.id)
    with pytest.raises(DuplicateKeyError):
        await product_repo.create(_draft("Hello World"))


async def test_slug_survives_rename(product_repo):
    product = await product_repo.create(_draft("Old Name"))
    renamed = await product_repo.update_by_id(product.id, {"name": "New Name"})
    assert renamed.slug == "old-name"


async def test_slug_survives_delete_and_restore(product_repo):
    product = await product_repo.create(_draft("Old Name"))
    await product_repo.update_by_id(product.id, {"name": "New Name"})
    await product_repo.soft_delete(product.id)
    restored = await product_repo.restore(product.id)
    assert restored.slug == "old-name"
    assert restored.name == "New Name"


# --- find_by_slug ---

async def test_find_by_slug_returns_active_product(product_repo):
    product = await product_repo.create(_draft("Desk Lamp"))
    assert (await product_repo.find_by_slug("desk-lamp")).id == product.id


async def test_find_by_slug_is_exact(product_repo):
    await product_repo.create(_draft("Desk Lamp"))
    assert await product_repo.find_by_slug("desk") is None
    assert await product_repo.find_by_slug("Desk-Lamp") is None


async def test_find_by_slug_hides_soft_deleted_product(product_repo):
    product = await product_repo.create(_draft("Desk Lamp"))
    await product_repo.soft_delete(product.id)
    assert await product_repo.find_by_slug("desk-lamp") is None


# --- get_deleted_products ---

async def test_get_deleted_products_lists_only_deleted(product_repo):
    created = await _seed(product_repo, 4)
    await product_repo.soft_delete(created[1].id)
    await product_repo.soft_delete(created[3].id)

    page = await product_repo.get_deleted_products()

    assert {p.id for p in page.data} == {created[1].id, created[3].id}
    assert page.total_count == 2
    assert page.total_pages == 1
    assert page.current_page == 1


async def test_get_deleted_products_most_recently_updated_first(product_repo):
    created = await _seed(product_repo, 3)
    for product in (created[2], created[0], created[1]):
        await product_repo.soft_delete(product.id)

    page = await product_repo.get_deleted_products()

    assert [p.id for p in page.data] == [created[1].id, created[0].id, created[2].id]


async def test_get_deleted_products_applies_extra_filter(product_repo):
    lamp = await product_repo.create(_draft("Desk Lamp"))
    chair = await product_repo.create(_draft("Chair"))
    await product_repo.soft_delete(lamp.id)
    await product_repo.soft_delete(chair.id)

    page = await product_repo.get_deleted_products(
        extra_filter=(TextSearch(("name", "description"), "lamp"),)
    )

    assert [p.id for p in page.data] == [lamp.id]


async def test_get_deleted_products_paginates(product_repo):
    created = await _seed(product_repo, 5)
    for product in created:
        await product_repo.soft_delete(product.id)
    page = await product_repo.get_deleted_products(page=2, limit=2)
    assert len(page.data) == 2
    assert page.total_pages == 3


async def test_get_deleted_products_rejects_zero_limit(product_repo):
    with pytest.raises(ValidationError):
        await product_repo.get_deleted_products(limit=0)


# --- get_products_infinite_scroll ---

async def test_infinite_scroll_first_batch_is_newest(product_repo):
    created = await _seed(product_repo, 5)
    batch = await product_repo.get_products_infinite_scroll(limit=2)
    assert [p.id for p in batch.data] == [created[4].id, created[3].id]
    assert batch.next_cursor == created[3].created_at
    assert batch.has_more is True


async def test_infinite_scroll_terminal_page_reports_has_more_then_empty(product_repo):
    await _seed(product_repo, 10)

    first = await product_repo.get_products_infinite_scroll(limit=10)
    assert len(first.data) == 10
    assert first.has_more is True

    second = await product_repo.get_products_infinite_scroll(
        limit=10, last_created_at=first.next_cursor
    )
    assert second.data == []
    assert second.has_more is False
    assert second.next_cursor is None


async def test_infinite_scroll_short_batch_has_no_more(product_repo):
    await _seed(product_repo, 3)
    batch = await product_repo.get_products_infinite_scroll(limit=10)
    assert len(batch.data) == 3
    assert batch.has_more is False


async def test_infinite_scroll_skips_soft_deleted(product_repo):
    created = await _seed(product_repo, 3)
    await product_repo.soft_delete(created[1].id)
    batch = await product_repo.get_products_infinite_scroll(limit=10)
    assert created[1].id not in {p.id for p in batch.data}


async def test_infinite_scroll_walk_is_monotonic_and_complete(product_repo):
    created = await _seed(product_repo, 11)
    seen = []
    cursor = None
    while True:
        batch = await product_repo.get_products_infinite_scroll(limit=3, last_created_at=cursor)
        stamps = [p.created_at for p in batch.data]
        assert stamps == sorted(stamps, reverse=True)
        if cursor is not None:
            assert all(stamp < cursor for stamp in stamps)
        seen.extend(p.id for p in batch.data)
        if not batch.has_more:
            break
        cursor = batch.next_cursor

    assert seen == [p.id for p in reversed(created)]


async def test_infinite_scroll_issues_no_count_query(product_repo, product_store):
    await _seed(product_repo, 2)
    product_store.calls.clear()
    await product_repo.get_products_infinite_scroll(limit=5)
    assert product_store.calls == ["find_many"]


async def test_infinite_scroll_rejects_zero_limit(product_repo):
    with pytest.raises(ValidationError):
        await product_repo.get_products_infinite_scroll(limit=0)
