from rna_nussinov_fold.scripts.predict_rna import main

if __name__ == '__main__':
    raise SystemExit(main())
