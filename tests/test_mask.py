from vaultdiff.mask import MaskOptions, mask_secrets, mask_value


def _secrets():
    return {"secret/app": {"password": "password", "user": "admin"}}


def test_mask_secrets_disabled():
    result = mask_secrets(_secrets(), MaskOptions())
    assert result["secret/app"]["password"] == "password"


def test_mask_secrets_enabled():
    result = mask_secrets(_secrets(), MaskOptions(enabled=True, mask_string="placeholder"))
    assert result["secret/app"] == {"password": "placeholder", "user": "placeholder"}


def test_mask_secrets_reveal_keys():
    opts = MaskOptions(enabled=True, mask_string="placeholder", reveal_keys=["user"])
    result = mask_secrets(_secrets(), opts)
    assert result["secret/app"]["user"] == "admin"
    assert result["secret/app"]["password"] == "placeholder"


def test_mask_secrets_reveal_is_case_sensitive():
    opts = MaskOptions(enabled=True, reveal_keys=["USER"])
    result = mask_secrets(_secrets(), opts)
    assert result["secret/app"]["user"] == "***"


def test_mask_secrets_does_not_mutate_input():
    data = _secrets()
    mask_secrets(data, MaskOptions(enabled=True))
    assert data["secret/app"]["user"] == "admin"


def test_mask_value_disabled():
    assert mask_value("name", "val", MaskOptions()) == "val"


def test_mask_value_enabled():
    opts = MaskOptions(enabled=True, mask_string="[hidden]")
    assert mask_value("name", "val", opts) == "[hidden]"


def test_mask_value_reveal_case_insensitive():
    opts = MaskOptions(enabled=True, mask_string="***", reveal_keys=["USER"])
    assert mask_value("user", "admin", opts) == "admin"