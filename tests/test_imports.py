def test_import_branchline_package() -> None:
    import importlib

    module = importlib.import_module("branchline")
    assert module is not None


def test_import_story_service_no_side_effects() -> None:
    from branchline.services import StoryService

    assert StoryService.__name__ == "StoryService"
