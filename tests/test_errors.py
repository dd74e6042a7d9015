from awstaghelper.errors import ResourceListingError, report_error


def test_report_error_without_error_prints_nothing(capsys):
    assert report_error(None) is False
    assert capsys.readouterr().out == ""


def test_report_error_prints_message(capsys):
    error = RuntimeError("AccessDenied: not allowed")
    assert report_error(error) is True
    assert capsys.readouterr().out == "AccessDenied: not allowed\n"


def test_report_error_prints_resource_listing_error(capsys):
    error = ResourceListingError("Not able to get ASGs")
    assert report_error(error) is True
    assert capsys.readouterr().out == "Not able to get ASGs\n"


def test_resource_listing_error_keeps_its_message():
    error = ResourceListingError("listing failed")
    assert str(error) == "listing failed"
    assert error.args == ("listing failed",)
    assert isinstance(error, RuntimeError)