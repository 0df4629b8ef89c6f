from crawlscope.formfields import Form, parse_form_fields

HTML_FORM_EXAMPLE = r"""<html>
<head>
	<title>HTML Form Test</title>
</head>
<body>
	<form method="POST" action="/test">
		<input type="text" name="firstname"><br>
		<textarea name=textarea1></textarea>
		<select name=select1></select>
		<input type=text />
	</form>
	<form method=post action=https://abs.example.com></form>
	<form action=//prel.example.com></form>
	<form action=\\unc.example.com></form>
	<form action=/root_rel></form>
	<form action=rel_path></form>
	<form></form>
</body>
</html>"""


def _forms():
    return parse_form_fields(HTML_FORM_EXAMPLE, "https://example.com/path")


def test_parse_form_fields_actions_and_methods():
    forms = _forms()
    assert len(forms) == 7
    assert forms[0].action == "https://example.com/test"
    assert forms[0].method == "POST"
    assert forms[1].method == "POST"
    assert forms[1].action == "https://abs.example.com"
    assert forms[2].method == "GET"
    assert forms[2].action == "//prel.example.com"
    assert forms[3].method == "GET"
    assert forms[3].action == "\\\\unc.example.com"
    assert forms[4].method == "GET"
    assert forms[4].action == "https://example.com/root_rel"
    assert forms[5].method == "GET"
    assert forms[5].action == "https://example.com/path/rel_path"
    assert forms[6].method == "GET"
    assert forms[6].action == "https://example.com/path"


def test_parse_form_fields_parameters():
    parameters = _forms()[0].parameters
    assert "firstname" in parameters
    assert "textarea1" in parameters
    assert "select1" in parameters
    assert len(parameters) == 3


def test_enctype_defaults():
    forms = _forms()
    assert forms[0].enctype == "application/x-www-form-urlencoded"
    assert forms[1].enctype == "application/x-www-form-urlencoded"
    assert forms[2].enctype == ""


def test_explicit_enctype_kept():
    html = '<form method="POST" enctype="multipart/form-data" action="/up"><input name="f"></form>'
    forms = parse_form_fields(html, "https://example.com/")
    assert forms == [
        Form(
            method="POST",
            action="https://example.com/up",
            enctype="multipart/form-data",
            parameters=["f"],
        )
    ]


def test_no_forms():
    assert parse_form_fields("<html><body><p>none</p></body></html>", "https://example.com/") == []