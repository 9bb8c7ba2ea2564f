import unittest
import os


def suite(loader=unittest.TestLoader(), pattern='test*.py'):
    """Loads all project's tests."""
    dir_ = os.path.dirname(os.path.dirname(__file__))
    top_level = os.path.realpath(os.path.join(dir_, ".."))
    all_tests = loader.discover(dir_, pattern, top_level_dir=top_level)
    return unittest.TestSuite(all_tests)


RESOURCES = os.path.join(os.path.dirname(__file__), "resources")

UNTAGGED = (
    "Lisa Raines, a lawyer and director of government relations for the "
    "Industrial Biotechnical Association, contends that a judge well-versed "
    "in patent law and the concerns of research-based industries would have "
    "ruled otherwise. And Judge Newman, a former patent lawyer, wrote in her "
    "dissent when the court denied a motion for a rehearing of the case by "
    "the full court, \"The panel's judicial legislation has affected an "
    "important high-technological industry, without regard to the "
    "consequences for research and innovation or the public interest.\" "
    "Says Ms. Raines, \"[The judgement] confirms our concern that the absence "
    "of patent lawyers on the court could prove troublesome.\"\n"
)

TAGGED = (
    "<nnp>Lisa</nnp> <nnp>Raines</nnp> <ppc>,</ppc> <det>a</det> "
    "<nn>lawyer</nn> <cc>and</cc> <nn>director</nn> <in>of</in> "
    "<nn>government</nn> <nns>relations</nns> <in>for</in> <det>the</det> "
    "<nnp>Industrial</nnp> <nnp>Biotechnical</nnp> <nnp>Association</nnp> "
    "<ppc>,</ppc> <vbz>contends</vbz> <in>that</in> <det>a</det> "
    "<nn>judge</nn> <jj>well-versed</jj> <in>in</in> <nn>patent</nn> "
    "<nn>law</nn> <cc>and</cc> <det>the</det> <nns>concerns</nns> "
    "<in>of</in> <jj>research-based</jj> <nns>industries</nns> "
    "<md>would</md> <vb>have</vb> <vbn>ruled</vbn> <rb>otherwise</rb> "
    "<pp>.</pp>\n"
)
