import copy
import pickle
import unittest
from unittest import mock

import numpy as np

from engtagger import EngTagger, Lexicon, TaggerConfig
from engtagger.tests import RESOURCES, TAGGED, UNTAGGED

RAIN = "I woke up to the sound of pouring rain."
BAD_WORD = "I woke up with a <bad> word."


class EngTaggerTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.lexicon = Lexicon.from_source(RESOURCES)

    def setUp(self):
        self.tagger = EngTagger(self.lexicon)

    def test_str(self):
        self.assertEqual('EngTagger', str(self.tagger))

    def test_get_readable(self):
        self.assertEqual(
            "I/PRP woke/VBD up/RB to/TO the/DET sound/NN of/IN pouring/VBG "
            "rain/NN ./PP",
            self.tagger.get_readable(RAIN))
        self.assertEqual(
            "I/PRP woke/VBD up/RB with/IN a/DET <bad>/NNP word/NN ./PP",
            self.tagger.get_readable(BAD_WORD))

    def test_get_readable_verbose(self):
        self.assertEqual("I/DETERMINER_POSSESSIVE_SECOND woke/VERB_PAST_TENSE",
                         self.tagger.get_readable("I woke", verbose=True))

    def test_tag(self):
        self.assertEqual(
            [("I", "prp"), ("woke", "vbd"), ("up", "rb"), (".", "pp")],
            self.tagger.tag("I woke up."))
        self.assertEqual(self.tagger.tag("I woke up."),
                         self.tagger.tag_pairs("I woke up."))

    def test_tag_tokens(self):
        self.assertEqual([("the", "det"), ("rain", "nn")],
                         self.tagger.tag(["the", "rain"]))

    def test_tag_invalid(self):
        for text in (None, "", "   "):
            self.assertEqual([], self.tagger.tag(text))
            self.assertIsNone(self.tagger.add_tags(text))
            self.assertIsNone(self.tagger.get_readable(text))
            self.assertIsNone(self.tagger.get_sentences(text))
            self.assertIsNone(self.tagger.get_words(text))
            self.assertIsNone(self.tagger.get_nouns(text))
            self.assertIsNone(self.tagger.get_noun_phrases(text))
            self.assertIsNone(self.tagger.get_proper_nouns(text))

    def test_add_tags(self):
        self.assertEqual("<prp>I</prp> <vbd>woke</vbd> <rb>up</rb> <pp>.</pp>",
                         self.tagger.add_tags("I woke up."))
        self.assertIsInstance(self.tagger.add_tags(UNTAGGED), str)

    def test_add_tags_verbose(self):
        self.assertEqual("<noun>rain</noun>",
                         self.tagger.add_tags("rain", verbose=True))

    def test_get_sentences(self):
        self.assertEqual(["I woke up.", "I heard the rain."],
                         self.tagger.get_sentences("I woke up. I heard the rain."))
        self.assertEqual(["I woke up"], self.tagger.get_sentences("I woke up"))

    def test_unknown_words(self):
        self.assertEqual([("asefasdf", "nn")], self.tagger.tag("asefasdf"))
        tagger = EngTagger(self.lexicon, unknown_word_tag="sym")
        self.assertEqual([("asefasdf", "sym")], tagger.tag("asefasdf"))

    def test_empty_lexicon(self):
        tagger = EngTagger(Lexicon())
        self.assertEqual([("rain", "nn"), ("falls", "nn")],
                         tagger.tag("rain falls"))

    def test_current_tag_reset(self):
        self.tagger.current_tag = "nn"
        self.tagger.reset()
        self.assertEqual("pp", self.tagger.current_tag)

        self.tagger.current_tag = "det"
        self.tagger.tag("I woke up")
        self.assertEqual("pp", self.tagger.current_tag)

    def test_calls_are_independent(self):
        first = self.tagger.tag("rain")
        self.tagger.tag("the sound of")
        self.assertEqual(first, self.tagger.tag("rain"))

    def test_get_words(self):
        self.assertEqual(
            {"sound of pouring rain": 1, "sound": 1, "pouring rain": 1,
             "rain": 1},
            self.tagger.get_words(RAIN))
        tagger = EngTagger(self.lexicon, longest_noun_phrase=1)
        self.assertEqual({"sound": 1, "rain": 1}, tagger.get_words(RAIN))

    def test_strip_markup(self):
        tagger = EngTagger(self.lexicon, strip_markup=True)
        self.assertEqual("I/PRP woke/VBD up/RB ./PP",
                         tagger.get_readable("<p>I woke <b>up</b>.</p>"))

    def test_accuracy(self):
        gold = [[("I", "prp"), ("woke", "vbd"), ("up", "rb"), (".", "pp")],
                [("rain", "nn"), ("pouring", "vbg")]]
        self.assertEqual(5 / 6, self.tagger.accuracy(gold))

    def test_can_deepcopy(self):
        copied = copy.deepcopy(self.tagger)
        self.assertEqual(self.tagger.tag(RAIN), copied.tag(RAIN))

    def test_can_pickle(self):
        tagger = EngTagger(self.lexicon, stem=True, relax=True)
        loaded = pickle.loads(pickle.dumps(tagger))
        self.assertEqual(tagger.conf, loaded.conf)
        self.assertEqual(tagger.tag(BAD_WORD), loaded.tag(BAD_WORD))


class ConfigTests(unittest.TestCase):
    def test_defaults(self):
        tagger = EngTagger(Lexicon())
        self.assertEqual(TaggerConfig("", False, False, 5, False), tagger.conf)

    def test_override_default_params(self):
        tagger = EngTagger(Lexicon(), longest_noun_phrase=3)
        self.assertEqual(3, tagger.conf.longest_noun_phrase)

    def test_unknown_option(self):
        with self.assertRaises(TypeError):
            EngTagger(Lexicon(), longest_phrase=3)

    def test_invalid_unknown_word_tag(self):
        with self.assertRaises(ValueError):
            EngTagger(Lexicon(), unknown_word_tag="xyz")

    def test_read_only(self):
        tagger = EngTagger(Lexicon())
        with self.assertRaises(AttributeError):
            tagger.conf = TaggerConfig(stem=True)
        with self.assertRaises(AttributeError):
            tagger.lexicon = Lexicon.from_source(RESOURCES)

    def test_loads_lexicon(self):
        with mock.patch("engtagger.tag.pos.Lexicon.load",
                        return_value=Lexicon()) as load:
            EngTagger(word_path="w.pickle", tag_path="t.pickle")
        load.assert_called_once_with("w.pickle", "t.pickle")


class AssignTagTests(unittest.TestCase):
    def test_special_words(self):
        tagger = EngTagger(Lexicon(), unknown_word_tag="fw")
        self.assertEqual("fw", tagger.assign_tag("pp", "-unknown-"))
        self.assertEqual("sym", tagger.assign_tag("pp", "-sym-"))
        self.assertEqual("", EngTagger(Lexicon()).assign_tag("pp",
                                                             "-unknown-"))

    def test_best_score(self):
        lexicon = Lexicon({"run": {"vb": 2, "nn": 8}},
                          {"to": {"vb": 0.9, "nn": 0.1}})
        tagger = EngTagger(lexicon)
        # 0.9 * 3 > 0.1 * 9
        self.assertEqual("vb", tagger.assign_tag("to", "run"))

    def test_ties_keep_first_tag(self):
        words = {"run": {"vb": 1, "nn": 1}}
        tagger = EngTagger(Lexicon(words, {"pp": {"vb": 0.2, "nn": 0.2}}))
        self.assertEqual("vb", tagger.assign_tag("pp", "run"))
        tagger = EngTagger(Lexicon(words, {"pp": {"nn": 0.2, "vb": 0.2}}))
        self.assertEqual("nn", tagger.assign_tag("pp", "run"))

    def test_no_transition(self):
        lexicon = Lexicon({"run": {"vb": 1}}, {"det": {"nn": 0.5}})
        tagger = EngTagger(lexicon)
        self.assertEqual("", tagger.assign_tag("det", "run"))
        self.assertEqual("", tagger.assign_tag("uh", "run"))
        self.assertEqual([("run", "nn")], tagger.tag(["run"]))

    def test_relax(self):
        lexicon = Lexicon({"glorp": {"nn": 1}},
                          {"det": {"jj": 0.5, "in": 0.4, "nn": 0.1}})
        self.assertEqual("nn", EngTagger(lexicon).assign_tag("det", "glorp"))
        tagger = EngTagger(lexicon, relax=True)
        self.assertEqual("jj", tagger.assign_tag("det", "glorp"))

    def test_cache(self):
        tagger = EngTagger(Lexicon.from_source(RESOURCES))
        tagger.assign_tag("det", "sound")
        tagger.assign_tag("det", "sound")
        self.assertEqual(1, tagger._cached_tag.cache_info().hits)

    def test_cached_equals_uncached(self):
        tagger = EngTagger(Lexicon.from_source(RESOURCES), relax=True)
        pairs = [("pp", "I"), ("det", "sound"), ("in", "pouring"),
                 ("det", "-cap-"), ("nn", "."), ("vbd", "zebra")]
        for _ in range(3):
            for prev_tag, word in pairs:
                self.assertEqual(tagger._best_tag(prev_tag, word),
                                 tagger.assign_tag(prev_tag, word))
        self.assertGreater(tagger._cached_tag.cache_info().hits, 0)


class ExtractTests(unittest.TestCase):
    def setUp(self):
        self.tagger = EngTagger(Lexicon())

    def test_get_verbs(self):
        self.assertEqual({"have": 1, "ruled": 1, "contends": 1},
                         self.tagger.get_verbs(TAGGED))

    def test_get_adverbs(self):
        self.assertEqual({"otherwise": 1}, self.tagger.get_adverbs(TAGGED))

    def test_get_interrogatives(self):
        tagged = ("<wdt>Which</wdt> <ppc>,</ppc> <wdt>whatever</wdt> "
                  "<ppc>,</ppc> <wp>who</wp> <ppc>,</ppc> <wp>whoever</wp> "
                  "<ppc>,</ppc> <wrb>when</wrb> <cc>and</cc> <wrb>how</wrb> "
                  "<vbp>are</vbp> <det>all</det> <nns>examples</nns> "
                  "<in>of</in> <nns>interrogatives</nns>")
        expected = {"when": 1, "how": 1, "Which": 1, "whatever": 1,
                    "who": 1, "whoever": 1}
        self.assertEqual(expected, self.tagger.get_interrogatives(tagged))
        self.assertEqual(expected, self.tagger.get_question_parts(tagged))

    def test_get_conjunctions(self):
        self.assertEqual({"and": 2, "of": 2, "for": 1, "that": 1, "in": 1},
                         self.tagger.get_conjunctions(TAGGED))

    def test_verb_forms(self):
        tagged = ("<vb>be</vb> <vbd>was</vbd> <vbg>being</vbg> "
                  "<vbn>been</vbn> <vbp>are</vbp> <vbz>is</vbz> "
                  "<vbz>is</vbz>")
        self.assertEqual({"be": 1}, self.tagger.get_infinitive_verbs(tagged))
        self.assertEqual({"was": 1}, self.tagger.get_past_tense_verbs(tagged))
        self.assertEqual({"being": 1}, self.tagger.get_gerund_verbs(tagged))
        self.assertEqual({"been": 1}, self.tagger.get_passive_verbs(tagged))
        self.assertEqual({"are": 1},
                         self.tagger.get_base_present_verbs(tagged))
        self.assertEqual({"is": 2}, self.tagger.get_present_verbs(tagged))
        self.assertEqual(6, len(self.tagger.get_verbs(tagged)))

    def test_adjective_forms(self):
        tagged = "<jj>big</jj> <jjr>bigger</jjr> <jjs>biggest</jjs>"
        self.assertEqual({"big": 1}, self.tagger.get_adjectives(tagged))
        self.assertEqual({"bigger": 1},
                         self.tagger.get_comparative_adjectives(tagged))
        self.assertEqual({"biggest": 1},
                         self.tagger.get_superlative_adjectives(tagged))

    def test_get_nouns(self):
        result = self.tagger.get_nouns(TAGGED)
        self.assertEqual(14, len(result))
        self.assertEqual(1, result["lawyer"])

    def test_pairs_input(self):
        pairs = [("big", "jj"), ("cats", "nns")]
        self.assertEqual({"cats": 1}, self.tagger.get_nouns(pairs))
        self.assertEqual({"big cats": 1, "cats": 1},
                         self.tagger.get_noun_phrases(pairs))

    def test_stem(self):
        self.assertEqual("gets", self.tagger.stem("gets"))
        tagger = EngTagger(Lexicon(), stem=True)
        self.assertEqual("get", tagger.stem("gets"))
        self.assertEqual({"concern": 1, "industri": 1},
                         {k: v for k, v in tagger.get_nouns(TAGGED).items()
                          if k in ("concern", "industri")})

    def test_stem_noun_phrases(self):
        tagger = EngTagger(Lexicon(), stem=True)
        result = tagger.get_noun_phrases(TAGGED)
        self.assertIn("concern", result)
        self.assertIn("research-based industries", result)
        result = tagger.get_max_noun_phrases(TAGGED)
        self.assertIn("lawyer", result)
        self.assertIn("patent law", result)

    def test_get_proper_nouns(self):
        tagged = ("<nnp>BBC</nnp> <vbz>means</vbz> <nnp>British "
                  "Broadcasting Corporation</nnp> <pp>.</pp>")
        self.assertEqual({"British Broadcasting Corporation": 2},
                         self.tagger.get_proper_nouns(tagged))

    def test_stem_proper_nouns(self):
        tagger = EngTagger(Lexicon(), stem=True)
        self.assertEqual(
            {"Corpor": 1},
            tagger.get_proper_nouns("<nnp>Corporations</nnp> <vbz>merge</vbz>"))
        tagged = ("<nnp>BBC</nnp> <vbz>means</vbz> <nnp>British "
                  "Broadcasting Corporation</nnp> <pp>.</pp>")
        self.assertEqual({"British Broadcasting Corpor": 2},
                         tagger.get_proper_nouns(tagged))

    def test_get_max_noun_phrases(self):
        self.assertEqual(6, len(self.tagger.get_max_noun_phrases(TAGGED)))

    def test_explain_tag(self):
        self.assertEqual("noun", EngTagger.explain_tag("nn"))
        self.assertEqual("verb_infinitive", self.tagger.explain_tag("vb"))


class TagDocumentsTests(unittest.TestCase):
    def setUp(self):
        self.tagger = EngTagger(Lexicon.from_source(RESOURCES))

    def test_tag_documents(self):
        documents = ["I woke up.", "", "I heard the rain."]
        result = self.tagger.tag_documents(documents)
        self.assertIsInstance(result, np.ndarray)
        self.assertEqual(object, result.dtype)
        self.assertEqual(3, len(result))
        self.assertEqual(["prp", "vbd", "rb", "pp"], result[0])
        self.assertEqual([], result[1])
        np.testing.assert_equal(result[2], ["prp", "vbd", "det", "nn", "pp"])

    def test_equal_lengths(self):
        result = self.tagger.tag_documents(["rain", "sound"])
        self.assertEqual((2,), result.shape)
        self.assertEqual(["nn"], result[1])

    def test_callback(self):
        callback = mock.Mock()
        self.tagger.tag_documents(["I woke up."] * 4, callback=callback)
        callback.assert_any_call(0.2, "POS Tagging...")
        callback.assert_called_with(1)
        progress = [c[0][0] for c in callback.call_args_list]
        self.assertEqual(sorted(progress), progress)

    def test_strip_markup(self):
        tagger = EngTagger(Lexicon.from_source(RESOURCES), strip_markup=True)
        result = tagger.tag_documents(["<b>I</b> woke up."])
        self.assertEqual(["prp", "vbd", "rb", "pp"], result[0])

    def test_empty(self):
        self.assertEqual(0, len(self.tagger.tag_documents([])))


if __name__ == "__main__":
    unittest.main()
