from sqlalchemy import Engine

from catalog.services.catalog import describe_schema


def test_schema_has_one_table_per_mapping_unit(engine: Engine) -> None:
    schema = describe_schema(engine)

    assert set(schema) == {"camping_product", "chair", "electrical_product", "phone", "product"}


def test_single_table_holds_subtype_columns(engine: Engine) -> None:
    schema = describe_schema(engine)

    assert {"dtype", "stone_type", "stone_size"} <= set(schema["product"])
    assert {"type", "fuel_type", "weight", "capacity"} <= set(schema["camping_product"])


def test_joined_subtype_table_only_holds_its_own_columns(engine: Engine) -> None:
    schema = describe_schema(engine)

    assert set(schema["phone"]) == {"id", "screen_size", "storage"}
    assert "screen_size" not in schema["electrical_product"]


def test_concrete_table_repeats_shared_columns(engine: Engine) -> None:
    schema = describe_schema(engine)

    assert set(schema["chair"]) == {"id", "name", "description", "material"}
