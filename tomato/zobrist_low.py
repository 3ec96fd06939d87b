"""Zobrist piece-square keys for the squares of ranks 1 to 4 (A1 through H4)."""

from __future__ import annotations

# Indexed as [square][piece][color]; colour 0 is white, 1 is black.
_LOW_SQUARE_KEYS: tuple[tuple[tuple[int, int], ...], ...] = (
    (
        (0x7A8F_6F07_A994_160F, 0x9697_1D2F_B6C9_117D),
        (0x680C_9E02_4EAB_9C67, 0x7A88_4882_D56E_D146),
        (0x1B6A_C3B8_D9D2_3D69, 0x5068_5CCA_FD89_5193),
        (0xB80E_3031_2851_6329, 0x9644_8615_50AC_DA55),
        (0xA57C_950C_3536_2588, 0xFC5E_06A6_1D1F_A511),
        (0x900F_BD55_461C_2C1D, 0x6E41_DBCB_C676_8190),
    ),
    (
        (0xA69B_813D_4490_5E46, 0xC1D0_9EA5_2BCD_CE99),
        (0x32F9_9B12_4304_E140, 0x7C9D_9683_0F6F_B137),
        (0x95E1_ABD7_665A_F1B3, 0x771F_1E1C_E10F_776A),
        (0x13D0_1466_DB4E_91E4, 0xDE6C_EEAD_0836_4DC3),
        (0x1CAA_0ADE_A80E_8826, 0x0DDF_5132_5DE5_4603),
        (0x8838_438B_9EBD_C1CC, 0x151B_0C8A_168E_8FBB),
    ),
    (
        (0xDBF6_CB75_6FEA_23FF, 0xA9A7_CEA4_C9FD_E245),
        (0x7B7A_F0B6_6F15_F1C2, 0x62B3_4798_CFB8_C4D4),
        (0x06B2_EEE3_B598_3C3B, 0x13FD_9A7A_D020_0318),
        (0x9955_27B3_54ED_86E1, 0x8038_DE05_A2AD_86E2),
        (0x87A5_A9AC_0A5E_22FB, 0xBCF6_437A_8F51_4FBA),
        (0xA90B_EED1_B245_3F2C, 0xD808_464D_4C08_C6FC),
    ),
    (
        (0x97A0_7DD9_59F7_C759, 0xB630_8F00_6986_16FB),
        (0x65FA_A808_87E3_98A3, 0x6C52_3BB7_7D1A_0683),
        (0x3713_7E93_ECD7_C3C6, 0x1A27_A7A4_3EE9_EA29),
        (0x3E15_91AA_273E_E489, 0xDA0F_FA53_C91D_E2D2),
        (0x7310_5088_9420_2253, 0x5FA9_DFBC_D51F_AA9B),
        (0xB891_A9C6_B48A_EB37, 0xBB1F_F48A_A2AE_B552),
    ),
    (
        (0xFCB9_A67F_6D03_9B97, 0x0D5C_B07E_3FB9_5C3D),
        (0x504F_4591_78BE_586F, 0x7D04_84CF_3BDB_8DE2),
        (0xC1EF_4CE6_52D2_5650, 0x081E_B965_EDA3_03B3),
        (0xD37E_D6CB_4E41_98C9, 0x2ED3_AA19_15D2_D71E),
        (0xC43F_2FB7_FF2C_C63D, 0x2CE1_E0F8_9A46_578B),
        (0x1439_71CF_0420_126B, 0xB27F_2AA6_6E21_BEC0),
    ),
    (
        (0x5B1A_3A75_CCA3_1163, 0x40BD_2ACC_7E56_5DA2),
        (0x8998_8BE8_7F2D_1B64, 0x85F3_B74A_C08E_81D2),
        (0xC684_ADDF_F3EB_F661, 0x416E_CAF7_ADFA_083F),
        (0x056B_D3BF_7D7D_C7F6, 0xEFB8_E59B_6EF3_E6FD),
        (0x1324_3CFF_2D98_6CA3, 0x845B_B801_7AEA_67A7),
        (0xEE0D_5B86_FCDC_DBE1, 0x9CF8_CCF6_1F84_A344),
    ),
    (
        (0x4E2F_0D22_2534_5789, 0x74BD_E80F_46FD_F4D7),
        (0x111C_67E2_4D3B_1C5E, 0x400C_E3E4_A05B_FAC2),
        (0xBD0B_9CCB_BD3F_7B9E, 0x8AE6_563C_6198_76B7),
        (0x8B83_0837_FF99_FE1F, 0xE4A1_F554_E741_6A2B),
        (0xF1B3_8BCC_A4EA_C996, 0x322A_186F_3B3C_AE3C),
        (0x88B6_31F7_09B6_0100, 0x852E_F553_3DCF_BEB9),
    ),
    (
        (0x9F3F_9678_9D2D_8ED8, 0x4571_5398_E06F_070D),
        (0xBCD9_2C1B_9640_ECFD, 0xB40F_F376_175E_FA7A),
        (0xB640_A630_2BC7_C492, 0x0982_2156_D312_33D3),
        (0x0B26_A678_B7E1_1FAA, 0x3551_6B54_B7A9_6D40),
        (0xDC02_A071_EC19_1052, 0xDF17_9271_EF16_8A9C),
        (0x4253_B34C_3A66_2B8F, 0x8710_541E_D439_A319),
    ),
    (
        (0xD37A_2DD4_8341_D993, 0x9ECE_ADF3_EDEC_2132),
        (0x9174_F7A2_0420_0D9B, 0xA657_D350_1E49_2EC6),
        (0x9195_FF11_76C8_1DFA, 0x0521_2C7C_0E7F_460F),
        (0x57FC_52AE_68E3_C687, 0x9112_E28C_0F7D_A82B),
        (0x2C60_FBF9_957D_8993, 0x75C1_3C39_5137_0EBE),
        (0xD6B5_FF65_53F6_F7D8, 0xA422_8D19_D039_00C0),
    ),
    (
        (0x2661_31EF_DB13_6212, 0xCD4C_040F_8EEC_83A0),
        (0xD3CE_DF31_423E_EA9B, 0xDA0B_C131_A38C_EE08),
        (0x3CD8_3DAF_4088_68C0, 0xFA50_EB10_CC19_8806),
        (0x5823_85F6_4201_993E, 0x5A17_51FA_A7EA_6DFB),
        (0x0F17_7CC2_105E_E395, 0xF008_3A33_8BEF_5D6F),
        (0x40F7_1955_4742_457F, 0x0B04_72A8_1CA5_208E),
    ),
    (
        (0xAAFA_81F5_EDD1_2F58, 0x14E3_ECE2_F7E1_59BE),
        (0x4224_C06C_F161_DC78, 0x6989_15B3_EA06_E751),
        (0xEF1B_9CCB_2509_D0DE, 0x04B6_668B_43E0_2003),
        (0xEFBC_A72F_1902_2052, 0x5D0F_96B5_53F6_DE07),
        (0xA573_2041_D124_50AA, 0x49CC_4EF4_6CEF_0608),
        (0x53EC_2517_E5C3_AF16, 0x08BC_6583_D421_3F6F),
    ),
    (
        (0x0A7E_E1A7_A249_3CB7, 0x86D2_8F5B_490C_E47F),
        (0x2D5B_E244_C729_8D63, 0x3EAD_BB3B_EB95_1085),
        (0x190C_6B89_C409_F038, 0x2A1F_3F23_D023_979C),
        (0xDD3B_8C7D_0E7F_DDBD, 0x5454_68DA_9697_F4DE),
        (0xFA93_78B8_36A9_7D22, 0xF9D3_C6ED_5CCA_E44C),
        (0xA6FF_4EC1_FF37_5B74, 0xBD3F_F736_8CA4_9B4D),
    ),
    (
        (0x45ED_4D8B_8532_8A9A, 0x8D7D_5FBA_2911_359D),
        (0x9B5B_AF08_91F4_644C, 0xF99F_2C7D_FDCD_71D5),
        (0xBC1B_8E8B_389A_6337, 0x4A5D_2537_40D3_38FC),
        (0x3493_42F6_719F_D484, 0x95B9_FB70_F361_AB9E),
        (0xFDFD_1396_2981_8CDA, 0x8BE9_E02A_CABF_0ADD),
        (0x52A1_7FF7_5527_B983, 0x7355_4752_E294_229B),
    ),
    (
        (0x8CEE_E843_954A_8B39, 0x61FE_EF89_5935_6BA8),
        (0xCBA3_1190_0F45_8D6E, 0x887B_EF90_3A8A_9EFD),
        (0xBCF6_8B86_F9A8_8691, 0x12EB_6604_23D6_ADAD),
        (0x6600_2362_A4F6_4015, 0x2DFA_6FC9_3619_3B9D),
        (0x735B_25AE_6078_79E7, 0xCEE5_3370_91A9_BED2),
        (0x672A_C937_CB86_CB3F, 0x54D7_A183_8DA2_A346),
    ),
    (
        (0x3074_E881_C901_CB89, 0x3706_82BA_A40E_9153),
        (0x4303_D814_1F7A_1F98, 0xDF53_3DE5_2612_FEF4),
        (0x679A_B215_E8C9_6B9D, 0xE2E6_E3F2_6DEC_3B75),
        (0x3890_4A4D_38FB_A812, 0x4588_77B3_5C5E_3003),
        (0x70CC_D3FB_07F9_425D, 0x6AB1_BE97_8917_0608),
        (0x4C7C_FECA_B108_1028, 0xCE45_E514_1B46_616A),
    ),
    (
        (0xCA96_F491_9828_C9F6, 0xAA28_D70A_046B_3432),
        (0x5F47_45DD_E035_4540, 0xD7FB_5155_8D22_DE75),
        (0x1724_DC96_0D14_841B, 0x48C4_FCC6_DB91_8D31),
        (0xBD8D_8043_9711_46C7, 0xFCD2_AAC4_8028_0B4D),
        (0xC3A7_50D8_E189_47F1, 0x83AB_3967_D488_4600),
        (0x83F3_1DC6_84FF_1004, 0x4D4E_B1C2_9FBB_5464),
    ),
    (
        (0x1874_78D2_7E02_4511, 0x28A1_91A1_649B_4C92),
        (0x1178_499A_D64A_9CDE, 0x8CAC_3B37_DB05_C4C3),
        (0x7EAB_D34F_5A47_E176, 0x0B57_83E3_7C3C_2A09),
        (0x707A_03E1_C93A_0111, 0x2764_6F40_77A5_F4CC),
        (0x083E_7E03_06C8_6094, 0xB3D9_D759_53F0_8E40),
        (0x0EFD_713D_83CD_33A9, 0x4E29_AA68_8FEA_04DB),
    ),
    (
        (0x84C1_B730_4133_83DC, 0xEC10_13CE_A128_9E69),
        (0xF993_C4E4_8B29_E8F6, 0x3E3B_70BB_3A34_55B3),
        (0x2C24_FC28_7122_D7DC, 0x8F89_5196_3B86_C052),
        (0x1F05_CC3D_0E09_1D9F, 0xA470_8326_D9DE_B2DF),
        (0x9A72_6C09_2972_DBA1, 0xB59E_6430_CF16_9554),
        (0xC9F5_8854_EE47_06D5, 0x4336_2C65_5A2C_6B11),
    ),
    (
        (0xD1B1_691C_01A0_E47A, 0x847F_9E8E_E82F_D8E2),
        (0xE516_271C_BC34_A74B, 0x25F1_377D_EDAF_07B3),
        (0x2339_173E_20A1_B285, 0xC3D7_C36A_DD10_B1F5),
        (0x6D22_DC15_737F_143A, 0x3CD2_3042_88B2_0E45),
        (0xF24B_4504_C56C_EF6D, 0x8CAA_AD65_C855_11AA),
        (0x6BF6_A021_9D48_682F, 0xE090_03FD_22C2_6AA5),
    ),
    (
        (0x38CD_23A8_50AA_24A8, 0xD74B_0F35_312A_78C5),
        (0xAB7D_9F31_7BA5_1067, 0x8F9D_CEA2_56C4_9670),
        (0x34D4_61A4_44FE_DD1E, 0x133C_1EFC_4CE0_41AE),
        (0xCEB3_C445_BE25_DB69, 0xD2D0_B38F_54D0_4EFB),
        (0x028D_1584_81D0_AA43, 0x520D_C1AB_45BF_57CE),
        (0x87C1_A9FA_8377_8629, 0x169E_E8CE_7ED4_7808),
    ),
    (
        (0xD3A6_15F0_E7C2_30F4, 0x08C7_0B64_DEBA_4E91),
        (0xAB25_303F_82E6_A964, 0x77C6_4FDB_D575_4840),
        (0x7356_A175_F849_6AB2, 0x0B5A_9B49_2995_4C30),
        (0x26F7_5DE5_0FA3_CBC2, 0x51E0_19AE_1942_05C8),
        (0x09BE_4E46_9187_6B69, 0xF62B_255E_14FC_2CEC),
        (0x01D2_160F_6120_60D3, 0xC473_C4C5_9D8D_7C36),
    ),
    (
        (0xDA1B_D073_2E5A_A04B, 0x1643_DFC2_BD4A_F914),
        (0x142E_1808_A156_4BEB, 0x8187_EA0D_7B21_CFB1),
        (0xBA53_765E_8ED2_AA8C, 0x6A3C_EDD3_2EFC_0A76),
        (0x3CA8_A243_AC28_0196, 0xE3F4_018E_B62B_4425),
        (0x170E_D952_8583_DA6E, 0x04BE_B4E6_4471_EED8),
        (0x3234_4D0B_47EF_8374, 0xDA23_EDB8_2E6A_D862),
    ),
    (
        (0x01EB_6C06_977D_4930, 0x7CB4_78AE_AEE8_E888),
        (0xFD23_90BD_2044_82A8, 0xE0A3_18EB_6BAC_6F58),
        (0xE4A5_67CE_17DD_CF3E, 0x47B6_6E75_BCD1_FCD5),
        (0xCC40_31C6_33FE_9936, 0x855A_0511_5B3C_87CA),
        (0x8A66_BC8A_A78F_F0EC, 0x4BDB_CDA1_7A34_770E),
        (0xF6C6_2CA8_D8A0_0AC7, 0x7D46_046A_2A8A_D518),
    ),
    (
        (0x61E2_A359_409E_E9AA, 0xC9CF_5B72_3233_B23C),
        (0x9C0A_C72A_CAE4_E975, 0x481E_414C_DA02_B493),
        (0xFAE6_AA6A_B2AA_F490, 0x0AA9_3AD2_AE0A_1307),
        (0x4D8C_0314_9008_552A, 0x07D2_8061_5EC9_8E04),
        (0x901C_974D_A3B9_02DF, 0x1FFC_4C28_0166_63F5),
        (0x6DCD_0EA3_F2D6_3836, 0xF97A_0252_AD0B_A1ED),
    ),
    (
        (0xC30D_1B1D_918F_D5F1, 0xCAA6_6A2D_ECE4_D03E),
        (0x43EF_7971_E718_C496, 0xA338_6A6F_CA45_4F4F),
        (0xC9B0_3EEC_20E0_C286, 0xBFC2_D913_DBC5_ADE7),
        (0x2350_8AFF_D535_EB91, 0x8943_E4FC_31CC_544E),
        (0x524D_1416_7391_8A03, 0x68AE_EC09_597C_62E5),
        (0x710C_3B31_6BD0_285B, 0x5ECA_36B8_3849_D8E6),
    ),
    (
        (0x3AE2_EE81_75D9_52CC, 0x68C9_849C_4E26_CD93),
        (0x0F1A_D111_F7DF_2F71, 0x1A26_1EDA_0B12_8113),
        (0xBACE_0903_EF86_CC3A, 0xDEFD_4D83_367F_4878),
        (0x598C_9D72_5ED2_6963, 0xC8CA_2179_1E8B_59AA),
        (0x219B_4553_B26B_30F1, 0xD30C_E653_40A1_2748),
        (0x3D86_A89B_7F75_07D7, 0x8473_9E8D_9DC8_F4F9),
    ),
    (
        (0xDA69_CADA_132E_8A72, 0x4D41_5989_2C1C_940A),
        (0x61AC_FCA1_AF31_E90F, 0xB58E_B64B_B9D4_6C6A),
        (0x2832_799D_8F37_7A27, 0xEA4B_D591_5257_8143),
        (0x7CF3_3D89_8D95_77C8, 0xDEE7_DEEE_13C4_8DCE),
        (0xE5B6_C151_2870_EE0F, 0x51F3_8347_48B3_CC73),
        (0xB3EB_92B4_085D_FAB7, 0x3B4B_5BDD_70DC_3DD6),
    ),
    (
        (0x0BA0_BC25_2376_696A, 0xDA6D_E87F_0742_1176),
        (0xD831_4D64_B50B_F5B5, 0x8E11_70C3_ACF0_D427),
        (0x8221_C083_02C6_D485, 0x116F_BA9A_0E0E_9174),
        (0x62B9_6529_1D80_AC65, 0xBD0B_6DE4_6418_A8B7),
        (0x5853_AC8E_4193_01C4, 0xB4F3_4F1A_130F_A07F),
        (0x827E_DEED_15E3_F9A6, 0x6364_71D0_FF6E_B4B1),
    ),
    (
        (0xCB4C_D1EC_AAD4_A2E9, 0x61C7_7727_771E_FF07),
        (0x20CB_F8A9_BBEA_93D4, 0x5D92_428E_A18F_15F8),
        (0x7FA3_CF35_44E5_3B2A, 0x75FD_87C5_B0F4_6996),
        (0xFC5A_37FE_3971_AF69, 0xA6A8_17E7_0450_D6F5),
        (0x73CB_F593_44F4_EC8C, 0x1919_F4AC_8496_3E5A),
        (0x8E50_5293_70A7_F70C, 0x39CF_B61A_BED7_786E),
    ),
    (
        (0x9044_2DDB_8391_8525, 0x35B8_E89E_9DA4_4589),
        (0x22FA_215F_CB37_7795, 0x07BA_6991_CCD6_A751),
        (0x419F_E3AE_A081_F59C, 0x4A7C_CAE1_3051_30FE),
        (0xAEBE_4B64_311E_A941, 0xDA7F_CC38_DEB5_E2F6),
        (0xEA06_D6B2_0582_17B8, 0xF375_D00E_A14A_4C90),
        (0x13B9_4B07_83FC_1620, 0x6C74_7A43_5417_BB9E),
    ),
    (
        (0x2405_D49B_83C3_58C9, 0x7C4B_5A4F_5CE0_574F),
        (0xD57B_1C8D_327A_877B, 0x597E_FC75_FA0C_5613),
        (0x0F02_1554_D8D9_D6DA, 0xC99A_32A8_3342_15CA),
        (0x417D_D5F0_6C25_B117, 0x5D80_0DD1_EDBD_F309),
        (0x077C_C780_26C6_7DD1, 0xF24D_F479_CA78_F984),
        (0x56CE_61B7_5EED_86DD, 0xE5F4_3158_B018_8BCA),
    ),
    (
        (0x9F97_0F5C_0D07_E26A, 0xFB69_61B4_2EF9_9F01),
        (0xBF9C_7122_4E27_A3C8, 0x6524_2A20_EA7B_B6D4),
        (0x42B8_FD06_6ADB_5307, 0x7863_9B84_B9D0_3A71),
        (0x2EB1_71B4_F090_4EF8, 0xCB25_2136_E953_21E3),
        (0x37A2_CB67_1DCA_69CA, 0x7205_C0B6_5B1D_48F2),
        (0x8A73_8EC5_ABCD_A1C4, 0x2B5C_94CD_2F46_1E31),
    ),
)


def low_square_keys() -> tuple[tuple[tuple[int, int], ...], ...]:
    """Return the keys for squares A1 to H4, indexed by square, piece and colour."""
    return _LOW_SQUARE_KEYS