def test_import_cvm_package() -> None:
    import importlib

    module = importlib.import_module("cvm")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from cvm.core.rng import RNG

    rng = RNG(42)
    value = rng.randrange(0, 2)
    assert value in (0, 1)


def test_import_services_and_cli_entry_point() -> None:
    from cvm.main import main
    from cvm.services import AbilityGenerator, BattleEngine, BattleService, FactoryError

    assert callable(main)
    assert AbilityGenerator and BattleEngine and BattleService and FactoryError
