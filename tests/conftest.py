"""
Shared fixtures: EFetch and ESearch XML payloads.
"""

import pytest


FULL_ARTICLE_XML = """<?xml version="1.0" ?>
<!DOCTYPE PubmedArticleSet PUBLIC "-//NLM//DTD PubMedArticle, 1st January 2024//EN" "https://dtd.nlm.nih.gov/ncbi/pubmed/out/pubmed_240101.dtd">
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
      <PMID Version="1">33301246</PMID>
      <Article PubModel="Print-Electronic">
        <Journal>
          <Title>The New England journal of medicine</Title>
          <JournalIssue CitedMedium="Internet">
            <Volume>383</Volume>
            <PubDate>
              <Year>2020</Year>
              <Month>Dec</Month>
              <Day>31</Day>
            </PubDate>
          </JournalIssue>
        </Journal>
        <ArticleTitle>Safety and Efficacy of the <i>BNT162b2</i> mRNA Covid-19 Vaccine.</ArticleTitle>
        <Abstract>
          <AbstractText Label="BACKGROUND">Severe acute respiratory syndrome coronavirus 2 infection has affected millions.</AbstractText>
          <AbstractText Label="METHODS">In an ongoing trial, we randomly assigned <b>persons</b> 16 years of age or older.</AbstractText>
        </Abstract>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y">
            <LastName>Polack</LastName>
            <ForeName>Fernando P</ForeName>
            <Initials>FP</Initials>
          </Author>
          <Author ValidYN="Y">
            <LastName>Thomas</LastName>
          </Author>
          <Author ValidYN="Y">
            <CollectiveName>C4591001 Clinical Trial Group</CollectiveName>
          </Author>
        </AuthorList>
      </Article>
      <MeshHeadingList>
        <MeshHeading>
          <DescriptorName UI="D000368" MajorTopicYN="N">Aged</DescriptorName>
        </MeshHeading>
        <MeshHeading>
          <DescriptorName UI="D000086382" MajorTopicYN="Y">COVID-19</DescriptorName>
          <QualifierName UI="Q000517" MajorTopicYN="N">prevention &amp; control</QualifierName>
        </MeshHeading>
      </MeshHeadingList>
      <KeywordList Owner="NOTNLM">
        <Keyword MajorTopicYN="N">mRNA vaccine</Keyword>
        <Keyword MajorTopicYN="N">SARS-CoV-2</Keyword>
      </KeywordList>
    </MedlineCitation>
    <PubmedData>
      <ArticleIdList>
        <ArticleId IdType="pubmed">33301246</ArticleId>
        <ArticleId>untyped-id</ArticleId>
        <ArticleId IdType="mid">NIHMS000000</ArticleId>
        <ArticleId IdType="doi">10.1056/NEJMoa2034577</ArticleId>
        <ArticleId IdType="pmc">PMC7745181</ArticleId>
        <ArticleId IdType="doi">10.9999/second-doi</ArticleId>
      </ArticleIdList>
      <ReferenceList>
        <Reference>
          <Citation>Some cited work.</Citation>
          <ArticleIdList>
            <ArticleId IdType="doi">10.1000/reference-doi</ArticleId>
          </ArticleIdList>
        </Reference>
      </ReferenceList>
    </PubmedData>
  </PubmedArticle>
</PubmedArticleSet>
"""


MINIMAL_ARTICLE_XML = """<?xml version="1.0" ?>
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation>
      <PMID Version="1">11111111</PMID>
    </MedlineCitation>
  </PubmedArticle>
</PubmedArticleSet>
"""


EMPTY_ARTICLE_SET_XML = """<?xml version="1.0" ?>
<PubmedArticleSet>
</PubmedArticleSet>
"""


def _article_xml(pmid: str, title: str = "Test Article", pmcid: str = "") -> str:
    pmc_id = f'<ArticleId IdType="pmc">{pmcid}</ArticleId>' if pmcid else ""
    return f"""<?xml version="1.0" ?>
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation>
      <PMID Version="1">{pmid}</PMID>
      <Article>
        <Journal><Title>Test Journal</Title></Journal>
        <ArticleTitle>{title}</ArticleTitle>
      </Article>
    </MedlineCitation>
    <PubmedData>
      <ArticleIdList>
        <ArticleId IdType="pubmed">{pmid}</ArticleId>
        {pmc_id}
      </ArticleIdList>
    </PubmedData>
  </PubmedArticle>
</PubmedArticleSet>
"""


def _esearch_xml(pmids) -> str:
    ids = "".join(f"<Id>{pmid}</Id>" for pmid in pmids)
    return f"""<?xml version="1.0" ?>
<eSearchResult>
  <Count>{len(pmids)}</Count>
  <RetMax>{len(pmids)}</RetMax>
  <RetStart>0</RetStart>
  <IdList>{ids}</IdList>
  <QueryTranslation>test</QueryTranslation>
</eSearchResult>
"""


@pytest.fixture
def full_article_xml():
    return FULL_ARTICLE_XML


@pytest.fixture
def minimal_article_xml():
    return MINIMAL_ARTICLE_XML


@pytest.fixture
def empty_article_set_xml():
    return EMPTY_ARTICLE_SET_XML


@pytest.fixture
def article_xml():
    """Factory for a small EFetch payload for one PMID."""
    return _article_xml


@pytest.fixture
def esearch_xml():
    """Factory for an ESearch payload listing the given PMIDs."""
    return _esearch_xml
