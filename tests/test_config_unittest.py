import os
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
from config import CheckoutPolicy


class CheckoutPolicyTests(unittest.TestCase):
    def test_defaults_are_faithful(self):
        policy = CheckoutPolicy()
        self.assertFalse(policy.accumulate_subtotal)
        self.assertFalse(policy.debit_balance)
        self.assertFalse(policy.block_expired)
        self.assertEqual(policy.shipping_fee, config.SHIPPING_FEE)
        self.assertEqual(policy.mode, config.FAITHFUL)

    def test_corrected(self):
        policy = CheckoutPolicy.corrected()
        self.assertTrue(policy.accumulate_subtotal)
        self.assertTrue(policy.debit_balance)
        self.assertEqual(policy.mode, config.CORRECTED)

    def test_mixed_switches_are_custom(self):
        self.assertEqual(CheckoutPolicy(debit_balance=True).mode, "custom")

    def test_negative_fee_rejected(self):
        with self.assertRaises(ValueError):
            CheckoutPolicy(shipping_fee=-1)

    def test_from_env(self):
        self.assertEqual(CheckoutPolicy.from_env({}).mode, config.FAITHFUL)
        policy = CheckoutPolicy.from_env({
            'POS_CHECKOUT_MODE': 'Corrected',
            'POS_BLOCK_EXPIRED': 'yes',
            'POS_SHIPPING_FEE': '45',
        })
        self.assertEqual(policy.mode, config.CORRECTED)
        self.assertTrue(policy.block_expired)
        self.assertEqual(policy.shipping_fee, 45)

    def test_from_env_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            CheckoutPolicy.from_env({'POS_CHECKOUT_MODE': 'strict'})
        with self.assertRaises(ValueError):
            CheckoutPolicy.from_env({'POS_SHIPPING_FEE': 'thirty'})


if __name__ == '__main__':
    unittest.main()
