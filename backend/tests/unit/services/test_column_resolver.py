from portfolio_shared.services.column_resolver import (
    PORTFOLIO_COLUMN_CANDIDATES,
    find_likely_column,
    resolve_portfolio_columns,
)


SUMMARY_LABELS = [
    "호실명",
    "명의",
    "준공일",
    "공급금액",
    "대출금",
    "이율",
    "월 대출이자",
    "월세",
    "계약갱신일",
    "대출갱신일",
    "실입주 여부",
    "비고",
    "사업자등록번호",
    "재산세(건문불)",
    "재산세(토지분)",
    "교통유발부담금",
]


def test_find_likely_column_uses_substring_match():
    assert find_likely_column(["호실명", "명의"], ["현장", "호실", "site"]) == "호실명"


def test_find_likely_column_is_case_insensitive():
    assert find_likely_column(["Monthly Rent"], ["rent"]) == "Monthly Rent"


def test_earlier_key_wins_over_earlier_column():
    # "월세" is tried before "임대료" even though "임대료" appears first
    assert find_likely_column(["임대료", "월세"], ["월세", "임대료"]) == "월세"


def test_find_likely_column_returns_none_without_match():
    assert find_likely_column(["명의", "비고"], ["현장", "호실", "site"]) is None


def test_resolve_portfolio_columns_maps_every_field():
    columns = resolve_portfolio_columns(SUMMARY_LABELS)

    assert columns.site == "호실명"
    assert columns.ownership == "명의"
    assert columns.supply_price == "공급금액"
    assert columns.loan_amount == "대출금"
    assert columns.interest_rate == "이율"
    assert columns.monthly_interest == "월 대출이자"
    assert columns.monthly_rent == "월세"
    assert columns.contract_renewal == "계약갱신일"
    assert columns.loan_renewal == "대출갱신일"
    assert columns.tenant_status == "실입주 여부"
    assert columns.building_tax == "재산세(건문불)"
    assert columns.land_tax == "재산세(토지분)"
    assert columns.traffic_charge == "교통유발부담금"
    assert columns.unresolved() == ()


def test_unresolved_lists_missing_fields():
    columns = resolve_portfolio_columns(["호실명", "월세"])

    missing = columns.unresolved()
    assert "site" not in missing
    assert "monthly_rent" not in missing
    assert "loan_amount" in missing
    assert len(missing) == len(PORTFOLIO_COLUMN_CANDIDATES) - 2
