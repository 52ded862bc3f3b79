import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from railcheck import (
    DictV,
    Email,
    Integer,
    ListV,
    MinLength,
    Number,
    Optional,
    ParseInteger,
    Required,
    String,
    WithDefault,
    to_pydantic,
)


class TestToPydantic:
    def test_basic_model(self):
        schema = {
            "name": Required(str),
            "age": Required(int),
        }
        User = to_pydantic("User", schema)
        user = User(name="Alice", age=30)
        assert user.name == "Alice"
        assert user.age == 30

    def test_optional_fields(self):
        schema = {
            "name": Required(str),
            "email": Optional(Email()),
        }
        User = to_pydantic("User", schema)
        user = User(name="Alice")
        assert user.email is None

    def test_missing_required_field(self):
        User = to_pydantic("User", {"name": Required(str)})
        with pytest.raises(PydanticValidationError):
            User()

    def test_pipe_uses_last_hinted_step(self):
        User = to_pydantic(
            "User",
            {
                "name": Required(String() & MinLength(2)),
                "age": Required(ParseInteger()),
            },
        )
        assert User.model_fields["name"].annotation is str
        assert User.model_fields["age"].annotation is int

    def test_nested_model(self):
        schema = DictV(
            {
                "name": Required(String()),
                "address": Required(DictV({"city": Required(String())})),
            }
        )
        User = to_pydantic("User", schema)
        user = User(name="Ada", address={"city": "London"})
        assert isinstance(user.address, BaseModel)
        assert user.address.city == "London"
        assert type(user.address).__name__ == "User_address"

    def test_list_field(self):
        Post = to_pydantic("Post", {"tags": Required(ListV(String()))})
        assert Post(tags=["a", "b"]).tags == ["a", "b"]
        with pytest.raises(PydanticValidationError):
            Post(tags=[{"not": "a string"}])

    def test_union_field(self):
        Item = to_pydantic("Item", {"value": Required(String() | Integer())})
        assert Item(value="x").value == "x"
        assert Item(value=3).value == 3

    def test_default_field_is_optional(self):
        Account = to_pydantic("Account", {"role": WithDefault("user")})
        assert Account().role is None
        assert Account(role="admin").role == "admin"

    def test_untyped_field(self):
        Thing = to_pydantic("Thing", {"anything": Required(Number() & (lambda x: x > 0))})
        assert Thing(anything=1.5).anything == 1.5

    def test_rejects_non_object_schema(self):
        with pytest.raises(TypeError):
            to_pydantic("Names", [str])
