"""Zobrist piece-square keys for the squares of ranks 5 to 8 (A5 through H8)."""

from __future__ import annotations

# Indexed as [square - 32][piece][color]; colour 0 is white, 1 is black.
_HIGH_SQUARE_KEYS: tuple[tuple[tuple[int, int], ...], ...] = (
    (
        (0xef47_0310_0ae9_2078, 0xc4f6_33a5_81e5_63b5),
        (0x6fff_a9c4_d077_1fc0, 0x1658_1521_8b91_c3f1),
        (0x97b0_eb4b_6e09_8dfd, 0x2b8b_6d7f_920a_9b91),
        (0xefd8_5558_9ccb_305b, 0xab11_8a0e_9751_96fc),
        (0x45bf_b0e8_37d1_a910, 0xdeaa_6087_7ad6_ddf7),
        (0x1838_707c_c193_66e6, 0xa367_9ad5_1c30_6f4f),
    ),
    (
        (0x36bf_7888_664d_7536, 0x2e64_3f48_3340_58b4),
        (0x55ba_a624_c9bd_1a8b, 0x635b_7591_62b1_ca05),
        (0x556b_d61c_3980_0179, 0x1d48_9999_2030_f195),
        (0xfc18_7527_8609_5734, 0x17cd_0791_1acb_4066),
        (0xb299_ae74_e759_5e32, 0xa47f_6170_c3f6_2ebe),
        (0x8725_f347_0439_4e45, 0xca8a_8277_c0a9_0e10),
    ),
    (
        (0xbb1b_7111_b8c9_33c9, 0x2f2c_4fa8_2de9_89d3),
        (0xbb05_67bd_2522_9cd8, 0x51dc_207b_bc27_7384),
        (0xfd47_1cb1_f346_d8b0, 0xebe5_562c_17b5_1684),
        (0xb742_1899_e2a4_7d1d, 0xf60a_f440_d9e8_4c57),
        (0x1349_569d_5679_a0ba, 0xda63_d6cd_d06e_a38d),
        (0x2de3_51b0_96d9_31c6, 0x343b_9467_4d6d_18b4),
    ),
    (
        (0x7b70_6fdb_a000_2431, 0x5fd3_6406_32f7_6f05),
        (0x5299_0934_0886_0b16, 0x6cee_2321_a624_9e60),
        (0x061e_d8e4_07c9_e1ae, 0x9007_f463_debd_9548),
        (0x40f5_edaa_ea63_46f4, 0xc15d_8c30_b3e5_dffe),
        (0xa43f_6730_daa3_1c50, 0x53c4_23c3_3e7b_2dce),
        (0xb944_16e5_0862_e4ec, 0x4063_8a05_5d80_3886),
    ),
    (
        (0xac6b_6122_c645_d80d, 0x8cc9_c4be_8bca_183b),
        (0x8921_e0e8_872b_5fb7, 0xccc4_be24_92eb_a3ca),
        (0x8e8d_c42c_8ed7_e488, 0xc4f5_6b8d_00c3_d938),
        (0x49a1_e378_34b1_f0be, 0x3501_f85d_c248_033a),
        (0x42f3_a782_cfca_3eb8, 0xa8f1_15c8_ac91_fea2),
        (0xbfe5_90b2_b31b_ad9c, 0x1297_cb92_74a7_d462),
    ),
    (
        (0x4470_48fe_8213_79ec, 0xfca2_37a4_046d_37ab),
        (0xbcc6_9293_df97_fd8f, 0x35a2_9259_0a06_261e),
        (0x5370_b765_c915_9a3a, 0x80f5_9279_e78a_56d0),
        (0x249c_9617_151b_fd8e, 0xb8e3_cb15_ebcb_be9e),
        (0x4f46_90b5_b510_9f3d, 0x715b_2f68_3561_abe7),
        (0x838b_bc1f_ffcd_4535, 0x6726_49b6_fb2c_824c),
    ),
    (
        (0x75f2_4526_b296_b799, 0x2271_5315_4f7c_7953),
        (0x1634_e086_2331_1125, 0xa426_22f5_4c5a_5b6c),
        (0x0ba7_f3fe_2e34_cd73, 0x2f5b_ccfe_50b7_f612),
        (0xff13_d109_9870_5623, 0xae29_29e4_5b4d_41ea),
        (0x8eef_356f_e6c0_dd1a, 0x8de2_18d1_d350_ce65),
        (0xd4a9_a89c_59dd_af0e, 0x8c97_f28a_3914_11bb),
    ),
    (
        (0xe88a_d6e0_6665_0504, 0x6955_4b0f_7f3e_f62e),
        (0x1c95_df7c_590a_7570, 0xb1b4_d038_365d_cb77),
        (0xf67f_453d_7219_3959, 0xe656_ae57_4431_94a3),
        (0x47c4_794f_e657_9033, 0xc44e_5048_6eb8_56e1),
        (0xb7a4_5d3d_8087_6154, 0x5c05_ef19_eaa8_6da4),
        (0x3881_66b7_137e_4d28, 0x4ccd_3647_bdfe_9219),
    ),
    (
        (0x9626_9ab8_1c40_1993, 0xd3ea_458d_fdbb_721a),
        (0x537b_b5bb_08c9_de63, 0x7ecc_ad15_bc61_0089),
        (0xe3cf_085b_7829_c594, 0x252b_7d28_f6cf_b83d),
        (0x9789_8edc_6796_a0d8, 0xa600_ae14_670b_c982),
        (0x905b_10e7_8f85_24b8, 0x86e1_e542_8b5f_7a43),
        (0xf5f2_6c22_36dc_56ba, 0x6460_18dd_95bc_6c06),
    ),
    (
        (0xf3b7_6f0b_0941_f5de, 0x9d31_86ea_d25f_318c),
        (0x850a_8a30_7a88_c52b, 0x7f1e_fe4a_6755_54f4),
        (0x4907_3060_ae97_c30c, 0x3909_64e3_5776_6b47),
        (0xa7cc_4de4_e73e_5181, 0x3cc5_a49c_c869_de26),
        (0x1490_de3b_87a6_a9a3, 0x9a07_ed52_472a_01bf),
        (0x8cb1_e0b0_fabb_decc, 0xf8b1_7ed2_b88d_a5d5),
    ),
    (
        (0x91f8_98d2_0bdf_72db, 0x1d91_c1d4_cdb6_803d),
        (0x3304_7b50_6228_27df, 0xe170_1e5c_8abd_31ef),
        (0x5840_8f17_0025_3477, 0x6a71_f2fa_6034_7f00),
        (0xfa32_6070_8b70_42f5, 0xf888_8876_687e_3dcf),
        (0x4cc0_588b_77c8_70ed, 0x7e8e_7e56_0d44_cf51),
        (0x7f6c_c29e_c6bd_fd87, 0x8acb_1076_6d57_8abd),
    ),
    (
        (0x3792_16d2_6f0f_6048, 0x50e0_8bd2_a68c_1dac),
        (0x54cd_97df_253a_b1f5, 0x7807_3dfc_36fd_ed40),
        (0xc0b7_d3ae_0327_e8ab, 0x5b53_df47_a180_d2c2),
        (0x2eb6_e2ca_d582_aa93, 0x98a5_4917_b339_c33a),
        (0xd1a1_c9f9_877c_8b7b, 0xad56_fa67_83ed_d6c3),
        (0x5b10_951f_ecb5_7fd4, 0x7cc6_7e42_6895_f308),
    ),
    (
        (0x0e65_c0a3_aade_74f7, 0xf0bb_8a54_6044_04c8),
        (0x86e3_0f3e_4db2_cba2, 0x6144_07ae_ec67_80fb),
        (0xdcb5_b540_f353_2d95, 0x66d0_4c70_da93_9725),
        (0x7b99_4039_bdea_1697, 0x4c1e_f45c_348f_09be),
        (0xe653_e6bb_f4b3_cf4b, 0x7c9c_6bfa_44a3_4ec3),
        (0x928c_36c8_a3e0_f7bf, 0xab7e_e787_c1e9_3d2b),
    ),
    (
        (0x012d_9cfc_78f6_de64, 0x37aa_3df1_e139_8e33),
        (0xf068_39d8_d875_6ddc, 0x455f_e3f0_840c_2f71),
        (0x6951_e856_c508_4973, 0x834e_7602_7c48_8519),
        (0xfd62_ea30_e7ab_1445, 0x11ab_e03e_aec4_d1d4),
        (0xab08_1849_1360_7c21, 0x6769_b7fe_3942_2972),
        (0xcf62_88ee_b934_dd19, 0x255f_da01_6a46_e4d0),
    ),
    (
        (0x0609_0669_2892_b1cf, 0x27e5_0b56_f707_d988),
        (0xeab9_6715_df72_f3c0, 0x4213_ea68_1e38_779b),
        (0x12bc_cd84_0f91_d237, 0x4107_d5f4_cbe7_fc16),
        (0xb09e_24a6_a8de_4571, 0xeafb_6cb3_7213_8b7a),
        (0x5474_20d5_0136_b284, 0x77d7_a570_b578_3f55),
        (0x2d53_68a6_5320_6955, 0xb8ee_a423_ede6_b703),
    ),
    (
        (0x1bea_9718_41cb_225b, 0x282e_cf99_a4c7_97eb),
        (0xee4d_985f_7712_499b, 0x69b5_d652_596a_304e),
        (0xc28d_dd5e_b95a_97df, 0x8c7b_4022_fd30_5c2f),
        (0x398e_79c9_252d_c4d9, 0x4bb4_3a91_cf88_97df),
        (0x843c_2dda_c0dc_9347, 0x463f_df8a_f13a_65e8),
        (0xd1d4_a808_88b7_4535, 0x87f0_5763_0d89_0774),
    ),
    (
        (0x493e_a26c_20cd_2f1d, 0x53e1_7a28_d1a9_3e81),
        (0xf30f_25c5_9961_34f5, 0xd938_2e3b_f8ad_455f),
        (0xb997_63a8_a7a3_2826, 0x371f_437e_0d1e_7d08),
        (0x96ff_aa55_a90b_102d, 0x2c18_e3df_652d_7897),
        (0xb3ff_c448_642c_9326, 0x8b18_2cc7_2971_8d8f),
        (0x7b1f_53ee_f9a0_c8ee, 0x2949_5791_4656_2f4f),
    ),
    (
        (0xc36d_52f8_a625_7727, 0x9a35_1bed_89e4_94c7),
        (0xb554_d3be_bcab_b14f, 0x3ffd_8cdc_0d0c_59f1),
        (0xd240_63d6_bd71_ea9b, 0xd90c_b610_196b_6e64),
        (0xfee4_1c99_d009_ca9e, 0x72ee_fce8_fb3a_4c93),
        (0xde14_b70e_1ec0_bb47, 0x101c_d909_edfa_eab7),
        (0xc81e_7c5f_5ca6_b678, 0x7f5d_abdd_e679_4be4),
    ),
    (
        (0xbd38_1938_5232_513b, 0x8fca_6552_1cb5_77ec),
        (0xa526_4c80_1ad8_e0a1, 0x541c_e792_213a_32da),
        (0x005e_a416_0e1b_2441, 0xfbee_f565_e46c_84e0),
        (0x502c_ce6a_f991_d907, 0xe732_d589_c457_fbd2),
        (0x0145_5140_d735_b101, 0xce74_824b_94a5_2407),
        (0x0aaa_7acc_08bd_6130, 0xb083_c9b1_3ed7_a562),
    ),
    (
        (0x69c3_2c20_c13a_a19a, 0x7591_bd18_af78_576d),
        (0x3e03_98a6_1e23_a3a4, 0xb936_0944_46ec_8f16),
        (0x6818_c9eb_6450_3827, 0x54f3_be9b_659f_6c3e),
        (0x33f4_a481_5040_73cf, 0x3363_388a_bc11_6cb2),
        (0x198e_2835_ec3a_4d40, 0x4437_2642_b0a8_b855),
        (0x6308_f8e1_c60a_0719, 0x628b_e4f9_d13e_de06),
    ),
    (
        (0xe82d_15c7_4acb_9af0, 0x194d_14e5_7990_4b58),
        (0x7299_58fc_b6d3_3bfe, 0x7a0e_6e0b_2864_da4f),
        (0x8387_e83b_b1ad_27ce, 0xa57f_ad83_9f9a_c467),
        (0x6139_d97e_4038_f578, 0x8646_4a00_bce1_fe52),
        (0x310e_e7cb_6eb6_eda4, 0xd750_3626_ec8d_42ec),
        (0xc4ea_4c91_8675_e9ee, 0xd1f2_ac58_b6c1_777e),
    ),
    (
        (0xebd2_3e84_dcd4_5be3, 0x7fb6_1226_2f4e_22d6),
        (0x2e68_4ff1_8c4a_6a44, 0x0533_a2db_6773_648b),
        (0xbe88_4594_d9d5_98a0, 0x240e_ec45_e24f_2bb4),
        (0x6f98_c8b3_0f55_12af, 0x2c4f_66fa_ef3b_54d5),
        (0xa378_0620_eefa_d115, 0xcf4c_80a2_506d_d1e8),
        (0xec19_27fc_5cfe_36ea, 0x3ab5_f47a_dc19_edf5),
    ),
    (
        (0x2acb_fad9_8fa7_ad1a, 0x5513_25d2_bf6e_5605),
        (0x8d4f_0a50_8451_228d, 0xf954_5100_1f32_7d07),
        (0x718a_c32a_f94c_49a5, 0xf9ac_2bed_ee54_22f5),
        (0x3be2_d6da_cc8c_162a, 0x582c_36ab_e320_4e4d),
        (0xf0d7_f62e_5796_33cf, 0xa2bb_b0e4_c6d2_ae40),
        (0x6bf8_d1f3_07ae_f1a4, 0xaaac_c948_16eb_f90c),
    ),
    (
        (0xde40_9c9c_4ba3_42b2, 0x753b_ae59_a966_89d6),
        (0x8b40_f8a0_7d9b_d042, 0x0382_92b7_ad0c_43df),
        (0x8759_668a_dd08_5edb, 0xadb7_95b8_b3eb_f5de),
        (0x501a_5a8c_3d89_8914, 0x5214_1af2_9f00_d1a3),
        (0x8972_a526_9d99_3a40, 0x366c_6807_312e_4a3f),
        (0xb6d4_e6ea_9140_3499, 0x5587_fbf1_10fd_caeb),
    ),
    (
        (0xab84_d334_a5b8_e476, 0xc164_7f80_43fc_d013),
        (0xf640_b5a0_5de6_45f7, 0x032a_ec8e_6703_7224),
        (0x8883_44bc_eb97_ac06, 0xbe49_849c_1562_233b),
        (0xaf7e_5f9c_0563_af30, 0x22ab_9129_dfe8_5979),
        (0xc30c_e92e_9be3_9080, 0x74de_4d11_f174_1521),
        (0x4bca_885b_3c17_301e, 0x7ae1_1a20_5cdc_6ca9),
    ),
    (
        (0x78b9_9483_a750_f8fc, 0x65b1_8d38_1580_6bd8),
        (0x7e04_d4b2_71f6_11cc, 0xb81f_1796_de4b_8648),
        (0x9693_0ca9_72cf_9511, 0x33d5_0ec9_eb84_48a7),
        (0xd6da_a914_982d_3a0e, 0xdd0e_c1f8_abb5_7b80),
        (0x1d49_d49c_e53f_57dd, 0xffb2_9d5a_2afc_02fb),
        (0xec5c_ccb1_f740_eac3, 0x5dbf_e236_d4e5_1d12),
    ),
    (
        (0xf59c_d480_bc7d_94e1, 0xe973_4d1d_ce97_d44f),
        (0x7acf_5094_7552_5eab, 0xe56e_5e92_3671_3a63),
        (0xf21e_7e09_7787_acbc, 0x06df_48f9_3f47_7ba9),
        (0x380a_e49c_a14f_e669, 0x8b0f_9644_546e_24a1),
        (0xa716_43a5_d0bc_aa41, 0x4fd1_3ff7_abb2_6e72),
        (0xe2f8_6e87_9479_7704, 0xce8f_c7ac_cd96_9c8f),
    ),
    (
        (0xcf7d_efc1_6c3b_bb57, 0x72c1_dbd8_6e51_0270),
        (0x5f9d_4008_cb9c_356f, 0x5005_08e3_07cc_4cab),
        (0x6b1e_80c1_27f1_398b, 0xcf99_38c1_f146_005d),
        (0x5a02_a982_f6f2_3e50, 0xf40d_b599_8816_335b),
        (0x3f4b_2de2_094d_6af7, 0x7b95_03a8_37e3_314d),
        (0x8f1e_d221_8718_4dd4, 0x72a9_2fa2_0236_b9d3),
    ),
    (
        (0x5cfc_3d8b_088e_61f3, 0x82f4_74fa_ec03_ae4f),
        (0xe5c4_2f45_1c7f_e808, 0x4643_2c44_ed4d_d9d1),
        (0x8d77_ef8d_dc76_243a, 0xbbff_f772_c8f4_7d86),
        (0x149a_2402_45c8_0665, 0xc844_d823_5d4a_d1f3),
        (0xefcc_ef85_4db4_2050, 0xe337_8c19_8cf7_3ee7),
        (0x9f31_df9d_eefb_5a65, 0x0945_ee6f_5774_0126),
    ),
    (
        (0xee1d_7bd8_af80_64d4, 0xfc76_1b9d_df9f_7e65),
        (0x4868_677c_7d48_34a3, 0x1d72_1985_6907_86b2),
        (0x2a72_33c9_3ad7_b58a, 0xd8a7_6561_b7bd_9015),
        (0xf2e1_39a5_9127_1ed1, 0x4235_1464_af52_0d38),
        (0xec2f_32bc_70a1_b808, 0x2da3_20ba_f9cc_8db5),
        (0xaaa3_da73_dba2_a97f, 0x6667_f494_5b8c_21e7),
    ),
    (
        (0xfc77_622d_57ae_ced3, 0xc834_1f4f_a09c_6321),
        (0x89f2_da02_6fa5_8609, 0xc248_eed4_1fad_0e8b),
        (0x685d_f892_22b5_549f, 0x0319_f713_c0ae_f7af),
        (0xf1cc_59e0_792e_f7da, 0x239c_6ee6_c4f0_43b6),
        (0x9800_e3de_6c97_40b6, 0x8a8e_ac82_6873_0c8a),
        (0xa5c7_6c1e_28cb_f2bb, 0x5fba_9ecb_b932_1165),
    ),
    (
        (0x0f9b_abaf_9432_2bda, 0x0da0_8c4a_e3db_2560),
        (0x7db3_3ec5_f124_1919, 0x2b19_a5a6_922e_6232),
        (0x25b9_c753_98f0_4a16, 0x04f7_36e9_a0ee_a0b4),
        (0x4924_0d0f_1dcf_403a, 0x4fa4_109b_2e31_11a8),
        (0xdfae_f694_3aff_3057, 0x6a1e_dc85_2c5d_62e9),
        (0x45be_48f7_2c52_74f4, 0xaac5_eff0_c18c_c487),
    ),
)


def high_square_keys() -> tuple[tuple[tuple[int, int], ...], ...]:
    """Return the keys for squares A5 to H8, indexed by square, piece and colour."""
    return _HIGH_SQUARE_KEYS