"""
🧪 test_image_service.py: шар викликача над джерелами
"""

import asyncio

import httpx
import pytest

from waifu_hub.errors import ImageSourceMissingDataError
from waifu_hub.infrastructure.images.image_service import ImageService
from waifu_hub.infrastructure.sources import WaifuIm, WaifuPics

PNG = b"\x89PNG\r\n\x1a\n"


def _serve_categories(fake_api):
    fake_api.add_json("https://api.waifu.pics/endpoints", {"sfw": ["waifu", "neko"], "nsfw": ["neko"]})
    fake_api.add_json(
        "https://api.waifu.im/tags",
        {"versatile": [{"name": "waifu"}], "nsfw": [{"name": "ero"}]},
    )


@pytest.mark.asyncio
async def test_service_uses_registry_by_default(image_client):
    service = ImageService(image_client)

    assert [type(s) for s in service.sources] == [WaifuPics, WaifuIm]


@pytest.mark.asyncio
async def test_populate_all_and_sources_for(fake_api, image_client):
    _serve_categories(fake_api)
    service = ImageService(image_client)

    await service.populate_all()
    pics, im = service.sources

    assert service.sources_for("waifu", is_sfw=True) == [pics, im]
    assert service.sources_for("neko", is_sfw=False) == [pics]
    assert service.sources_for("ero", is_sfw=False) == [im]
    assert service.sources_for("ero", is_sfw=True) == []


@pytest.mark.asyncio
async def test_populate_all_propagates_first_failure(fake_api, image_client):
    fake_api.add_json("https://api.waifu.pics/endpoints", {"sfw": []})
    fake_api.add_json("https://api.waifu.im/tags", {"versatile": [], "nsfw": []})
    service = ImageService(image_client)

    with pytest.raises(ImageSourceMissingDataError):
        await service.populate_all()


@pytest.mark.asyncio
async def test_fetch_records_image_and_reuses_it(fake_api, image_client):
    url = "https://i.waifu.pics/x.png"
    fake_api.add_json("https://api.waifu.pics/sfw/waifu", {"url": url})
    fake_api.add_bytes(url, PNG)
    service = ImageService(image_client)
    pics = service.sources[0]

    first = await service.fetch(pics, "waifu", is_sfw=True)
    second = await service.fetch(pics, "waifu", is_sfw=True)

    assert image_client.history == {url: first}
    assert second is first
    downloads = [r for r in fake_api.requests if r.url.host == "i.waifu.pics"]
    assert len(downloads) == 1


@pytest.mark.asyncio
async def test_populate_all_waits_for_every_source_before_raising(fake_api, image_client):
    release = asyncio.Event()

    async def slow_tags(request):
        await release.wait()
        return httpx.Response(200, json={"versatile": [{"name": "late"}], "nsfw": []})

    fake_api.add_json("https://api.waifu.pics/endpoints", {"sfw": []})
    fake_api.add("https://api.waifu.im/tags", slow_tags)
    service = ImageService(image_client)
    _, im = service.sources

    populate = asyncio.create_task(service.populate_all())
    for _ in range(100):
        if len(fake_api.requests) == 2:
            break
        await asyncio.sleep(0)
    for _ in range(20):
        await asyncio.sleep(0)

    assert not populate.done()                                      # WaifuPics уже впав, WaifuIm ще чекає

    release.set()
    with pytest.raises(ImageSourceMissingDataError):
        await populate

    assert im.sfw == {"late"}
    assert [t for t in asyncio.all_tasks() if t is not asyncio.current_task()] == []


@pytest.mark.asyncio
async def test_populate_all_raises_first_failure_in_registry_order(fake_api, image_client):
    fake_api.add_json("https://api.waifu.pics/endpoints", {"sfw": []})
    fake_api.add_json("https://api.waifu.im/tags", {"error": "boom"}, status_code=500)
    service = ImageService(image_client)

    with pytest.raises(ImageSourceMissingDataError):
        await service.populate_all()
