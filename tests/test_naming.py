from enumgen.naming import (
    capitalize_field,
    enum_file_name,
    enum_type_name,
    package_of,
    strip_type_suffix,
)


def test_strip_type_suffix_drops_data_object_markers():
    assert strip_type_suffix("OrderDO") == "Order"
    assert strip_type_suffix("OrderDTO") == "Order"
    assert strip_type_suffix("UserPOJO") == "User"
    assert strip_type_suffix("AccountEntity") == "Account"
    assert strip_type_suffix("Todo") == "Todo"
    assert strip_type_suffix("Order") == "Order"


def test_enum_type_name_combines_owner_and_field():
    assert enum_type_name("OrderDO", "status") == "OrderStatusEnum"
    assert enum_type_name("UserVO", "payType", suffix="Type") == "UserPayTypeType"
    assert enum_type_name(None, "status") == "UnknownStatusEnum"
    assert enum_type_name("Order", "") == "OrderFieldEnum"


def test_capitalize_field_only_touches_first_letter():
    assert capitalize_field("orderState") == "OrderState"


def test_package_and_file_name():
    assert package_of("com.example.order.OrderDO") == "com.example.order"
    assert package_of("OrderDO") == ""
    assert package_of(None) == ""
    assert enum_file_name("OrderStatusEnum") == "OrderStatusEnum.java"
