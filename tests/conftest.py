import pytest


SAMPLE_PAGE = """
<html lang="pl" dir="ltr">
<head>
  <title>gruby – Wikisłownik, wolny słownik wielojęzyczny</title>
</head>
<body>
  <section data-mw-section-id="1">
    <div class="mw-heading">
      <h2 id="gruby_(język_polski)">gruby (<span class="lang-code-pl">język polski</span>)</h2>
    </div>

    <table class="wikitable odmiana adj">
      <tbody>
        <tr>
          <th rowspan="2">przypadek</th>
          <th colspan="4"><i>liczba pojedyncza</i></th>
          <th colspan="2"><i>liczba mnoga</i></th>
        </tr>
        <tr>
          <td class="forma">mos/mzw</td>
          <td class="forma">mrz</td>
          <td class="forma">ż</td>
          <td class="forma">n</td>
          <td class="forma">mos</td>
          <td class="forma">nmos</td>
        </tr>
        <tr>
          <td class="forma">mianownik</td>
          <td colspan="2">gruby</td>
          <td>gruba</td>
          <td>grube</td>
          <td>grubi</td>
          <td>grube</td>
        </tr>
      </tbody>
    </table>

    <span>wymowa: IPA: [ˈɡrubɨ]</span>

    <dl>
      <dt><span class="field-title fld-znaczenia">znaczenia:</span></dt>
      <dd></dd>
    </dl>

    <p><i>przymiotnik</i></p>

    <dl>
      <dd>(1.1) otyły</dd>
      <dd>(1.2) mający dużą grubość, średnicę</dd>
      <dd>(1.3) wulgarny, prostacki, nieokrzesany</dd>
    </dl>
  </section>
</body>
</html>
"""

NOUN_PAGE = """
<html>
<body>
  <section data-mw-section-id="1">
    <h2>kot (<span class="lang-code-pl">język polski</span>)</h2>
    <p><i>rzeczownik, rodzaj męskozwierzęcy</i></p>
    <p><i>rzeczownik, rodzaj żeński</i></p>
    <table class="wikitable odmiana">
      <tr><th>przypadek</th><th>liczba pojedyncza</th><th>liczba mnoga</th></tr>
      <tr><td>mianownik</td><td>kotka</td><td>kotki</td></tr>
      <tr><td>dopełniacz</td><td>kotki</td><td>kotek</td></tr>
    </table>
  </section>
</body>
</html>
"""

MEANINGS_PAGE = """
<html>
  <dl>
    <dt><span class="fld-znaczenia">znaczenia:</span></dt>
    <dd></dd>
  </dl>
  <span></span>
  <dl>
    <dd>(1.1) pierwsze znaczenie</dd>
    <dd>(1.2) drugie znaczenie; dodatkowy opis</dd>
    <dd>(1.3) trzecie znaczenie</dd>
  </dl>
</html>
"""

TABLE_WITH_HEADERS = """
<table>
  <tr>
    <td>przypadek</td>
    <td>liczba pojedyncza</td>
    <td>liczba mnoga</td>
  </tr>
  <tr>
    <td>mianownik</td>
    <td>słowo</td>
    <td>słowa</td>
  </tr>
</table>
"""


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


@pytest.fixture
def noun_page():
    return NOUN_PAGE


@pytest.fixture
def meanings_page():
    return MEANINGS_PAGE


@pytest.fixture
def table_with_headers():
    return TABLE_WITH_HEADERS
