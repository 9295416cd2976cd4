from __future__ import annotations

import threading
from pathlib import Path

from commonlib.assets.sink import HostResources
from commonlib.runtime.bootstrap import build_services, register_default_directories
from commonlib.runtime.config import load_config


def test_host_startup_then_late_mod_registrations(
    tmp_path: Path, write_voices, write_image, make_bundle, grid_object
) -> None:
    config = load_config(env={"COMMONLIB_PLUGINS_DIR": str(tmp_path / "plugins")})
    layout = config.directories
    make_bundle(layout.layouts_dir / "base.bundle", {"r.json": grid_object("rig_base", ("m", 2, 2))})
    write_image(layout.slot_images_dir / "helmet.png", color=(1, 2, 3, 255))
    write_voices(layout.voices_dir, "base.json", {"v1": "base/v1"})

    other_mod = tmp_path / "plugins" / "OtherMod"
    make_bundle(
        other_mod / "RigLayouts" / "other.bundle",
        {
            "dup.json": grid_object("rig_base", ("m", 9, 9)),
            "new.json": grid_object("rig_other", ("m", 1, 3)),
        },
    )
    write_image(other_mod / "SlotImages" / "helmet.png", color=(9, 9, 9, 255))
    write_image(other_mod / "SlotImages" / "pouch.bmp", image_format="BMP")
    write_voices(other_mod / "Voices", "broken.json", "{")
    write_voices(other_mod / "Voices", "ok.json", {"v1": "other/v1", "v2": "other/v2"})

    host = HostResources()
    services = build_services(config, host)
    register_default_directories(services, config)

    # Other mods register concurrently after startup.
    threads = [
        threading.Thread(target=services.layouts.register_directory, args=(other_mod / "RigLayouts",)),
        threading.Thread(target=services.slots.register_directory, args=(other_mod / "SlotImages",)),
        threading.Thread(target=services.voices.register_directory, args=(other_mod / "Voices",)),
        threading.Thread(target=services.voices.register_directory, args=(layout.voices_dir,)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert services.layouts.get("rig_base").grids[0].width == 2
    assert tuple(services.slots.get("helmet").pixels[0, 0]) == (1, 2, 3, 255)
    assert services.voices.get("v1") == "base/v1"
    assert services.voices.get("v2") == "other/v2"
    assert sorted(host.cached_resources.keys()) == [
        "Slots/helmet",
        "Slots/pouch",
        "UI/Rig Layouts/rig_base",
        "UI/Rig Layouts/rig_other",
    ]
    assert sorted(host.resource_keys.keys()) == ["v1", "v2"]
    assert services.voices.stats().units_failed == 1
    assert services.voices.stats().directories == 2
