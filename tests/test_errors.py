from codedoc.errors import CodedocError, DocumentError, FileParseError, RootNotFoundError


def test_parse_error_names_the_file_and_reason():
	err = FileParseError("src/a.ts", "invalid start byte")
	assert isinstance(err, CodedocError)
	assert err.path == "src/a.ts"
	assert str(err) == "Cannot parse source file: src/a.ts (invalid start byte)"


def test_root_error():
	err = RootNotFoundError("/nowhere", "does not exist")
	assert str(err) == "Cannot analyze root directory: /nowhere (does not exist)"


def test_message_only():
	assert str(DocumentError("Project document not found")) == "Project document not found"
