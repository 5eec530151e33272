import pytest

PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="


@pytest.fixture
def png_data_url():
    """A 1x1 PNG as a data URL."""
    return f"data:image/png;base64,{PNG_BASE64}"


@pytest.fixture
def full_result():
    return {
        "productName": "TurboBattery X",
        "company": "PowerCorp",
        "keyNumbers": ["3x longer", "5000mAh"],
        "measurableFacts": ["Battery capacity: 5000mAh", "Fast charge: 45W"],
        "category": "tech spec",
        "briefContext": "Smartphone battery endurance claim.",
        "truthScore": 72,
        "report": "Independent tests show above-average endurance but not 3x under standardized benchmarks.",
        "sources": [
            {"title": "PowerCorp specs", "url": "https://example.com/specs"},
            {"title": "Lab review", "url": "https://example.com/review"},
        ],
    }


@pytest.fixture
def minimal_result():
    return {
        "productName": None,
        "company": None,
        "keyNumbers": [],
        "measurableFacts": [],
        "category": None,
        "briefContext": None,
        "truthScore": None,
        "report": "Insufficient information to verify.",
        "sources": [],
    }
