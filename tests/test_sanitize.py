from leadintake.services.sanitize import sanitize_fields, sanitize_input


def test_sanitize_input_escapes_markup():
    assert sanitize_input("<script>alert('x')</script>") == (
        "&lt;script&gt;alert(&#x27;x&#x27;)&lt;&#x2F;script&gt;"
    )
    assert sanitize_input('say "hi"') == "say &quot;hi&quot;"


def test_sanitize_input_leaves_plain_text():
    assert sanitize_input("Jane Smith") == "Jane Smith"
    assert sanitize_input("Tom & Jerry") == "Tom & Jerry"  # ampersand passes through


def test_sanitize_input_empty():
    assert sanitize_input("") == ""
    assert sanitize_input(None) == ""


def test_sanitize_fields():
    assert sanitize_fields({"name": "<b>Jane</b>", "email": None}) == {
        "name": "&lt;b&gt;Jane&lt;&#x2F;b&gt;",
        "email": "",
    }
