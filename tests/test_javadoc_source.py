import pytest

from enumgen.javadoc.source import find_field, scan_java_source

ORDER_SOURCE = """package com.example.order;

import lombok.Data;

/**
 * Order persisted in this class's table.
 */
@Data
public class OrderDO {

    /** primary key */
    private Long id;

    /**
     * 订单状态
     * 0-待处理, 1:处理中, 2：完成
     */
    @Column(name = "status")
    private Integer status;

    // not javadoc
    private String remark;

    /** 1-alipay，2-wechat */
    private final List<Integer> channels = new ArrayList<>();

    /** getter docs */
    public Integer getStatus() {
        return status;
    }
}
"""


def test_scan_java_source_finds_package_class_and_fields():
    source = scan_java_source(ORDER_SOURCE)
    assert source.package == "com.example.order"
    assert source.class_name == "OrderDO"
    assert source.qualified_name == "com.example.order.OrderDO"
    assert [f.name for f in source.fields] == ["id", "status", "channels"]


def test_find_field_returns_javadoc_and_line():
    source = scan_java_source(ORDER_SOURCE)
    status = find_field(source, "status")
    assert "0-待处理" in status.doc
    assert status.doc.startswith("/**")
    assert status.line == ORDER_SOURCE.splitlines().index("    private Integer status;") + 1


def test_find_field_rejects_undocumented_fields():
    source = scan_java_source(ORDER_SOURCE)
    with pytest.raises(LookupError):
        find_field(source, "remark")
    with pytest.raises(LookupError):
        find_field(source, "getStatus")


def test_scan_java_source_without_package():
    source = scan_java_source("class Plain {\n  /** 1-a */\n  int kind;\n}\n")
    assert source.package == ""
    assert source.qualified_name == "Plain"
    assert find_field(source, "kind").line == 3


def test_scan_java_source_skips_nested_type_fields():
    text = """public class Outer {
    private String brace = "{ not a block";

    static class Inner {
        /** 1-inner */
        private int kind;
    }

    /** 0-top, 1-level */
    private int kind;

    /** '}' stays inside the literal */
    private char close = '}';
}
"""
    source = scan_java_source(text)
    assert source.class_name == "Outer"
    assert [f.name for f in source.fields] == ["kind", "close"]
    assert "0-top" in find_field(source, "kind").doc
