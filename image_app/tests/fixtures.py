"""Search-results HTML snippets used across tests."""

PLACEHOLDER_GIF = "data:image/gif;base64,R0lGODlhAQABAIAAAP///wAAACH5BAEAAAAALAAAAAABAAEAAAICRAEAOw=="

INLINE_IMAGE_HTML = """
<html><body>
  <img src="https://cdn.pharmcdn.net/tylenol.jpg" width="300" height="300" alt="타이레놀">
</body></html>
"""

SCRIPT_ONLY_HTML = """
<html><head>
  <script>
    var data = ["https://random-ads.net/x.jpg", "https://ctfassets.net/img/tylenol.png"];
  </script>
</head><body><div>no images here</div></body></html>
"""

INLINE_AND_SCRIPT_HTML = """
<html><head>
  <script>AF_initDataCallback({data: ["https://ctfassets.net/img/tylenol.png"]});</script>
</head><body>
  <img src="https://cdn.pharmcdn.net/inline.jpg" width="200" height="200">
</body></html>
"""

PLACEHOLDERS_ONLY_HTML = f"""
<html><body>
  <img src="{PLACEHOLDER_GIF}">
  <img src="https://cdn.pharmcdn.net/pixel.gif" width="1" height="1">
</body></html>
"""

TEST_DOMAIN_HTML = """
<html><body>
  <img src="https://images.example.com/tylenol.jpg" width="300" height="300">
</body></html>
"""
