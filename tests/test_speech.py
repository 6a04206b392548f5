from glasscompass.speech import HeadingReader, format_heading


class FakeSpeech:

    def __init__(self):
        self.spoken = []

    def speak(self, text):
        self.spoken.append(text)


def test_format_heading():
    assert format_heading(0.) == '0 degrees north'
    assert format_heading(1.) == '1 degree north'
    assert format_heading(1.4) == '1 degree north'
    assert format_heading(0.5) == '1 degree north'
    assert format_heading(2.) == '2 degrees north'
    assert format_heading(45.) == '45 degrees north east'
    assert format_heading(180.2) == '180 degrees south'
    assert format_heading(307.5) == '308 degrees north west'

    # Rounds back around to zero instead of reading 360
    assert format_heading(359.6) == '0 degrees north'


def test_heading_reader():
    sink = FakeSpeech()
    reader = HeadingReader(sink)
    assert reader.read_aloud(90.) == '90 degrees east'
    assert reader.read_aloud(271.) == '271 degrees west'
    assert sink.spoken == ['90 degrees east', '271 degrees west']
