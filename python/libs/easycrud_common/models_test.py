from easycrud_common.models import User, UserBase


def test_user_base_all_fields_optional():
    candidate = UserBase()
    assert candidate.name is None
    assert candidate.percentage is None


def test_user_base_ignores_client_id():
    candidate = UserBase.model_validate({"id": 42, "name": "Alice"})
    assert candidate.name == "Alice"
    assert "id" not in candidate.model_dump()


def test_user_base_keeps_numbers_as_text():
    candidate = UserBase.model_validate({"mobileNumber": 9876543210, "branch": 3.5})
    assert candidate.mobileNumber == "9876543210"
    assert candidate.branch == "3.5"


def test_user_model():
    user = User(
        id=1,
        name="Alice",
        email="alice@example.com",
        studentClass="FY",
        percentage=87.5,
    )
    assert user.id == 1
    assert user.studentClass == "FY"
    assert user.percentage == 87.5


def test_user_json_field_names():
    dumped = User(id=3, name="Bob").model_dump()
    assert set(dumped) == {
        "id",
        "name",
        "email",
        "course",
        "studentClass",
        "percentage",
        "branch",
        "mobileNumber",
    }
