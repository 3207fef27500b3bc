"""INSERT 문 파서 테스트."""

OPTIONS_INSERT = (
    "INSERT INTO `wp_options` (`option_id`, `option_name`, `option_value`, `autoload`) VALUES "
    "(1,'siteurl','https://example.com','yes'),"
    "(2,'home','https://example.com','yes')"
)


class TestFindParenthesizedGroups:
    """최상위 괄호 그룹 탐색 테스트."""

    def test_find_top_level_groups(self):
        """최상위 괄호 그룹을 등장 순서대로 반환해야 한다."""
        from dumpcheck.parser.row_parser import find_parenthesized_groups

        assert find_parenthesized_groups("(a,b) VALUES (1,2),(3,4)") == ["(a,b)", "(1,2)", "(3,4)"]

    def test_keep_nested_parentheses_inside_group(self):
        """중첩 괄호는 바깥 그룹에 포함되어야 한다."""
        from dumpcheck.parser.row_parser import find_parenthesized_groups

        groups = find_parenthesized_groups("VALUES (1,'a(b)'),(2,'c')")

        assert groups == ["(1,'a(b)')", "(2,'c')"]

    def test_ignore_unmatched_closing_parenthesis(self):
        """열리지 않은 닫는 괄호는 무시해야 한다."""
        from dumpcheck.parser.row_parser import find_parenthesized_groups

        assert find_parenthesized_groups(") (1)") == ["(1)"]

    def test_unclosed_group_is_dropped(self):
        """닫히지 않은 그룹은 반환하지 않아야 한다."""
        from dumpcheck.parser.row_parser import find_parenthesized_groups

        assert find_parenthesized_groups("(1) (2") == ["(1)"]

    def test_no_groups(self):
        """괄호가 없으면 빈 리스트를 반환해야 한다."""
        from dumpcheck.parser.row_parser import find_parenthesized_groups

        assert find_parenthesized_groups("DROP TABLE wp_posts") == []


class TestTargetTable:
    """INSERT 대상 테이블 추출 테스트."""

    def test_backtick_quoted_table(self):
        """백틱으로 감싼 테이블명을 추출해야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        assert InsertRowParser().target_table(OPTIONS_INSERT) == "wp_options"

    def test_unquoted_table(self):
        """따옴표 없는 테이블명을 추출해야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        assert InsertRowParser().target_table("insert into wp_blogs VALUES (1)") == "wp_blogs"

    def test_database_qualified_table(self):
        """데이터베이스명이 붙은 경우 테이블명만 추출해야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        statement = "INSERT IGNORE INTO `blog`.`wp_options` (`option_name`) VALUES ('home')"

        assert InsertRowParser().target_table(statement) == "wp_options"

    def test_not_an_insert(self):
        """INSERT 문이 아니면 None을 반환해야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        assert InsertRowParser().target_table("DROP TABLE wp_options") is None


class TestParse:
    """INSERT 문 레코드 변환 테스트."""

    def test_parse_complete_insert(self):
        """컬럼 목록이 있는 INSERT 문을 레코드로 변환해야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        records = InsertRowParser().parse(OPTIONS_INSERT, "wp_options")

        assert len(records) == 2
        assert records[0].table == "wp_options"
        assert records[0].fields == {
            "option_id": "1",
            "option_name": "siteurl",
            "option_value": "https://example.com",
            "autoload": "yes",
        }
        assert records[1].get("option_name") == "home"

    def test_other_table_gives_no_records(self):
        """다른 테이블의 INSERT 문은 빈 리스트를 반환해야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        assert InsertRowParser().parse(OPTIONS_INSERT, "wp_blogs") == []

    def test_table_name_is_case_sensitive(self):
        """테이블명은 대소문자를 구분해야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        assert InsertRowParser().parse(OPTIONS_INSERT, "WP_OPTIONS") == []

    def test_short_row_fills_missing_columns_with_none(self):
        """값이 부족한 행은 남은 컬럼을 None으로 채워야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        statement = "INSERT INTO wp_blogs (blog_id, site_id, domain, path) VALUES (3,1)"

        records = InsertRowParser().parse(statement, "wp_blogs")

        assert records[0].fields == {"blog_id": "3", "site_id": "1", "domain": None, "path": None}

    def test_extra_values_are_dropped(self):
        """컬럼 수보다 많은 값은 버려야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        statement = "INSERT INTO wp_blogs (blog_id, domain) VALUES (1,'a.com','/','extra')"

        records = InsertRowParser().parse(statement, "wp_blogs")

        assert records[0].fields == {"blog_id": "1", "domain": "a.com"}

    def test_nested_parentheses_in_value(self):
        """값 안의 괄호는 행 경계로 취급하지 않아야 한다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        statement = (
            "INSERT INTO wp_options (option_name, option_value) VALUES "
            "('blogname','Site (beta)'),('home','https://example.com')"
        )

        records = InsertRowParser().parse(statement, "wp_options")

        assert [record.get("option_value") for record in records] == [
            "Site (beta)",
            "https://example.com",
        ]

    def test_comma_inside_quoted_value_splits_value(self):
        """따옴표 안의 쉼표도 값 구분자로 처리된다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        statement = (
            "INSERT INTO wp_options (option_name, option_value, autoload) VALUES "
            "('blogname','Hello, world','yes')"
        )

        records = InsertRowParser().parse(statement, "wp_options")

        assert records[0].fields == {
            "option_name": "blogname",
            "option_value": "Hello",
            "autoload": "world",
        }


class TestHeaderlessInsert:
    """컬럼 목록 없는 INSERT 문 테스트.

    첫 번째 값 튜플이 헤더로 사용되는 입력 형태로, 올바른 처리 방식이
    정해지지 않았다. 현재 동작을 고정해 둔다.
    """

    def test_first_row_is_consumed_as_header(self):
        """첫 번째 값 튜플은 헤더로 사용되어 레코드에서 빠진다."""
        from dumpcheck.parser.row_parser import InsertRowParser

        statement = (
            "INSERT INTO `wp_options` VALUES "
            "(1,'siteurl','https://example.com','yes'),"
            "(2,'home','https://example.com','yes')"
        )

        records = InsertRowParser().parse(statement, "wp_options")

        assert len(records) == 1
        assert records[0].get("option_name") is None
        assert records[0].get("siteurl") == "home"
