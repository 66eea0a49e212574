"""
🧪 test_waifu_im.py: адаптер api.waifu.im (v4)

Перевіряє:
- Розкладку тегів versatile/nsfw по наборах
- Інвертований прапорець is_nsfw у /search
- Заголовок Accept-Version
- Порожній масив images → помилка відсутніх даних
"""

import pytest

from waifu_hub.errors import ImageSourceDecodeError, ImageSourceMissingDataError
from waifu_hub.infrastructure.sources.waifu_im import WaifuIm

TAGS = "https://api.waifu.im/tags"
SEARCH = "https://api.waifu.im/search"


@pytest.mark.asyncio
async def test_populate_categories_splits_versatile_and_nsfw(fake_api, image_client):
    fake_api.add_json(
        TAGS,
        {
            "versatile": [{"name": "maid", "tag_id": 1}, {"name": "waifu", "tag_id": 2}],
            "nsfw": [{"name": "ero", "tag_id": 3}],
        },
    )
    source = WaifuIm(image_client)

    await source.populate_categories()

    assert source.sfw == {"maid", "waifu"}
    assert source.nsfw == {"maid", "waifu", "ero"}
    request = fake_api.requests[0]
    assert request.url.params["full"] == "true"
    assert request.headers["Accept-Version"] == "v4"


@pytest.mark.asyncio
async def test_populate_categories_twice_does_not_duplicate(fake_api, image_client):
    fake_api.add_json(TAGS, {"versatile": [{"name": "maid"}], "nsfw": [{"name": "ero"}]})
    source = WaifuIm(image_client)
    source.nsfw.add("kept")

    await source.populate_categories()
    await source.populate_categories()

    assert source.sfw == {"maid"}
    assert source.nsfw == {"kept", "maid", "ero"}


@pytest.mark.asyncio
async def test_populate_categories_tag_without_name(fake_api, image_client):
    fake_api.add_json(TAGS, {"versatile": [{"name": "maid"}, {"id": 5}], "nsfw": []})
    source = WaifuIm(image_client)

    with pytest.raises(ImageSourceMissingDataError):
        await source.populate_categories()

    assert source.sfw == {"maid"}


@pytest.mark.parametrize(("is_sfw", "expected"), [(True, "false"), (False, "true")])
@pytest.mark.asyncio
async def test_get_image_url_inverts_sfw_flag(fake_api, image_client, is_sfw, expected):
    fake_api.add_json(SEARCH, {"images": [{"url": "https://cdn.waifu.im/1.jpg"}]})
    source = WaifuIm(image_client)

    url = await source.get_image_url("maid", is_sfw=is_sfw)

    assert url == "https://cdn.waifu.im/1.jpg"
    request = fake_api.requests[-1]
    assert request.url.params["is_nsfw"] == expected
    assert request.url.params["included_tags"] == "maid"
    assert request.headers["Accept-Version"] == "v4"


@pytest.mark.asyncio
async def test_get_image_url_takes_first_image(fake_api, image_client):
    fake_api.add_json(SEARCH, {"images": [{"url": "https://cdn/1.png"}, {"url": "https://cdn/2.png"}]})
    source = WaifuIm(image_client)

    assert await source.get_image_url("waifu", is_sfw=True) == "https://cdn/1.png"


@pytest.mark.asyncio
async def test_get_image_url_empty_images(fake_api, image_client):
    fake_api.add_json(SEARCH, {"images": []})
    source = WaifuIm(image_client)

    with pytest.raises(ImageSourceMissingDataError) as exc_info:
        await source.get_image_url("maid", is_sfw=False)

    assert isinstance(exc_info.value, LookupError)
    assert fake_api.requests[-1].url.params["is_nsfw"] == "true"


@pytest.mark.asyncio
async def test_get_image_url_images_not_a_list(fake_api, image_client):
    fake_api.add_json(SEARCH, {"images": None})
    source = WaifuIm(image_client)

    with pytest.raises(ImageSourceDecodeError):
        await source.get_image_url("maid", is_sfw=True)


@pytest.mark.asyncio
async def test_populate_categories_nsfw_not_a_list(fake_api, image_client):
    fake_api.add_json(TAGS, {"versatile": [{"name": "maid"}], "nsfw": {"name": "ero"}})
    source = WaifuIm(image_client)

    with pytest.raises(ImageSourceDecodeError):
        await source.populate_categories()

    assert source.nsfw == {"maid"}


@pytest.mark.asyncio
async def test_populate_categories_unhashable_tag_name(fake_api, image_client):
    fake_api.add_json(TAGS, {"versatile": [{"name": ["maid"]}], "nsfw": []})
    source = WaifuIm(image_client)

    with pytest.raises(ImageSourceDecodeError):
        await source.populate_categories()
