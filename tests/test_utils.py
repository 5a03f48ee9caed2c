from smsprovider.utils import mask_phone


def test_mask_phone():
    assert mask_phone("+8613800138000") == "+86*******8000"


def test_mask_short_phone():
    assert mask_phone("12345") == "*****"
